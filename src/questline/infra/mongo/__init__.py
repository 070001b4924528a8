from questline.infra.mongo.quests_repo import QuestsRepoMongo
from questline.infra.mongo.statuses_repo import StatusesRepoMongo

__all__ = ["QuestsRepoMongo", "StatusesRepoMongo"]
