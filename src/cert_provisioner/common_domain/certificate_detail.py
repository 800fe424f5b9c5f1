from pydantic import BaseModel

from cert_provisioner.common_domain.certificate_summary import BaseAcmModel
from cert_provisioner.common_domain.enum.certificate_status import CertificateStatus


class ValidationResourceRecord(BaseAcmModel):
    name: str
    type: str
    value: str


class DomainValidationOption(BaseAcmModel):
    domain_name: str
    validation_status: str | None = None
    validation_method: str | None = None
    resource_record: ValidationResourceRecord | None = None  # not yet generated right after the request


class CertificateDetail(BaseAcmModel):
    certificate_arn: str
    domain_name: str
    status: CertificateStatus | None = None
    domain_validation_options: list[DomainValidationOption] | None = None  # absent until the CA has processed the request


class ValidationChallenge(BaseModel):
    record_name: str
    record_value: str
    record_type: str
    target_domain_name: str

    @staticmethod
    def from_domain_validation_option(domain_validation_option: DomainValidationOption) -> 'ValidationChallenge':
        resource_record = domain_validation_option.resource_record
        return ValidationChallenge(
            record_name=resource_record.name,
            record_value=resource_record.value,
            record_type=resource_record.type,
            target_domain_name=domain_validation_option.domain_name,
        )
