"""Static assignee list for the task form picker.

Tasks have no assignee column, so these are never joined against stored rows.
"""
from typing import List

from kanban.schemas.assignee import AssigneeRead

_AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"

ASSIGNEES: List[AssigneeRead] = [
    AssigneeRead(id="1", name="Sarah Chen", email="sarah.chen@company.com", avatar_url=_AVATAR_URL.format(seed="Sarah")),
    AssigneeRead(id="2", name="Alex Kumar", email="alex.kumar@company.com", avatar_url=_AVATAR_URL.format(seed="Alex")),
    AssigneeRead(id="3", name="Maria Garcia", email="maria.garcia@company.com", avatar_url=_AVATAR_URL.format(seed="Maria")),
    AssigneeRead(id="4", name="James Wilson", email="james.wilson@company.com", avatar_url=_AVATAR_URL.format(seed="James")),
    AssigneeRead(id="5", name="Yuki Tanaka", email="yuki.tanaka@company.com", avatar_url=_AVATAR_URL.format(seed="Yuki")),
]
