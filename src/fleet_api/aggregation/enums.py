from enum import Enum


class GroupBy(str, Enum):
    model = "model"
    svc = "svc"
