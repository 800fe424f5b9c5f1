from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from cert_provisioner.common_domain.enum.certificate_status import CertificateStatus


# ACM responses are PascalCase (e.g., 'CertificateArn'); models can be populated from either form.
class BaseAcmModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class CertificateSummary(BaseAcmModel):
    certificate_arn: str
    domain_name: str
    status: CertificateStatus | None = None  # only present in newer ACM listing responses
