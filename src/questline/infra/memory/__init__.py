from questline.infra.memory.quests_repo import QuestsRepoMemory
from questline.infra.memory.statuses_repo import StatusesRepoMemory

__all__ = ["QuestsRepoMemory", "StatusesRepoMemory"]
