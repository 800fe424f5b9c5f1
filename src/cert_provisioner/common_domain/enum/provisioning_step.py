from enum import StrEnum


class ProvisioningStep(StrEnum):
    LIST_CERTIFICATES = 'list-certificates'
    REQUEST_CERTIFICATE = 'request-certificate'
    AWAIT_VALIDATION_METADATA = 'await-validation-metadata'
    DESCRIBE_CERTIFICATE = 'describe-certificate'
    APPLY_DNS_CHANGE = 'apply-dns-change'
