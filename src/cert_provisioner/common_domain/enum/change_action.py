from enum import StrEnum


class ChangeAction(StrEnum):
    CREATE = 'CREATE'
