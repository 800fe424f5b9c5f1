from abc import ABC
from typing import Literal, Union

from pydantic import BaseModel, Field
from typing_extensions import Annotated

from cert_provisioner.common_domain.certificate_summary import CertificateSummary
from cert_provisioner.common_domain.enum.provision_outcome_type import ProvisionOutcomeType


class BaseProvisionOutcome(BaseModel, ABC):
    domain_name: str


class AlreadyExistsOutcome(BaseProvisionOutcome):
    outcome_type: Literal[ProvisionOutcomeType.ALREADY_EXISTS] = ProvisionOutcomeType.ALREADY_EXISTS
    certificate: CertificateSummary


class ProvisionedOutcome(BaseProvisionOutcome):
    outcome_type: Literal[ProvisionOutcomeType.PROVISIONED] = ProvisionOutcomeType.PROVISIONED
    certificate_arn: str
    change_id: str


class DisabledOutcome(BaseProvisionOutcome):
    outcome_type: Literal[ProvisionOutcomeType.DISABLED] = ProvisionOutcomeType.DISABLED


ProvisionOutcome = Union[AlreadyExistsOutcome, ProvisionedOutcome, DisabledOutcome]
AnnotatedProvisionOutcome = Annotated[ProvisionOutcome, Field(discriminator='outcome_type')]
