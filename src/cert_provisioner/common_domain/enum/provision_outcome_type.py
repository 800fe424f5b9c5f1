from enum import StrEnum


class ProvisionOutcomeType(StrEnum):
    ALREADY_EXISTS = 'already-exists'
    PROVISIONED = 'provisioned'
    DISABLED = 'disabled'
