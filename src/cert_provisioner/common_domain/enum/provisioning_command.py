from enum import StrEnum


class ProvisioningCommand(StrEnum):
    CREATE_CERTIFICATE = 'create-cert'
    SUMMARY = 'summary'
