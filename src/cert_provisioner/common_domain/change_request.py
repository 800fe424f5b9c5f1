from pydantic import BaseModel

from cert_provisioner.common_domain.certificate_detail import ValidationChallenge
from cert_provisioner.common_domain.domain_spec import DomainSpec
from cert_provisioner.common_domain.enum.change_action import ChangeAction

VALIDATION_RECORD_TTL_SECONDS = 60


class ChangeRequest(BaseModel):
    action: ChangeAction = ChangeAction.CREATE
    record_name: str
    record_value: str
    record_type: str
    ttl_seconds: int = VALIDATION_RECORD_TTL_SECONDS
    hosted_zone_id: str
    comment: str

    @staticmethod
    def from_validation_challenge(challenge: ValidationChallenge, domain_spec: DomainSpec) -> 'ChangeRequest':
        return ChangeRequest(
            record_name=challenge.record_name,
            record_value=challenge.record_value,
            record_type=challenge.record_type,
            hosted_zone_id=domain_spec.hosted_zone_id,
            comment=f"DNS Validation for certificate {domain_spec.domain_name}",
        )

    def to_change_batch(self) -> dict:
        # Route 53 ChangeBatch structure with a single change
        return {
            'Comment': self.comment,
            'Changes': [
                {
                    'Action': self.action.value,
                    'ResourceRecordSet': {
                        'Name': self.record_name,
                        'Type': self.record_type,
                        'TTL': self.ttl_seconds,
                        'ResourceRecords': [{'Value': self.record_value}],
                    },
                }
            ],
        }
