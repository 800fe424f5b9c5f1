from cert_provisioner.common_domain.certificate_detail import CertificateDetail
from cert_provisioner.common_domain.certificate_summary import CertificateSummary
from cert_provisioner.common_domain.enum.validation_method import ValidationMethod
from cert_provisioner.logger_util import get_logger

logger = get_logger(__name__)


class CertificateAuthorityClient:
    """
    Thin wrapper around an (already opened) aioboto3 ACM client. Each method is a single remote call (or a sequence of
    page calls, for listing); nothing is retried and errors from the SDK are raised to the caller as they are.
    """
    def __init__(self, acm_client, log_level=None):
        self.acm_client = acm_client

        self.logger = logger.getChild(self.__class__.__name__)
        if log_level is not None:
            self.logger.setLevel(log_level)

    async def list_certificates(self) -> list[CertificateSummary]:
        certificate_summaries = []
        list_params = {}
        while True:
            response = await self.acm_client.list_certificates(**list_params)
            self.logger.trace("list_certificates response: %s", response)
            page = response.get('CertificateSummaryList', [])
            certificate_summaries.extend(CertificateSummary.model_validate(summary) for summary in page)
            next_token = response.get('NextToken')
            if not next_token:
                break
            list_params['NextToken'] = next_token
        self.logger.debug("Found %d certificate(s).", len(certificate_summaries))
        return certificate_summaries

    async def request_certificate(self, domain_name: str, validation_method: ValidationMethod = ValidationMethod.DNS,
                                  idempotency_token: str | None = None) -> str:
        request_params = {
            'DomainName': domain_name,
            'ValidationMethod': validation_method.value,
        }
        if idempotency_token:
            request_params['IdempotencyToken'] = idempotency_token

        response = await self.acm_client.request_certificate(**request_params)
        self.logger.debug("request_certificate response: %s", response)
        return response['CertificateArn']

    async def describe_certificate(self, certificate_arn: str) -> CertificateDetail:
        response = await self.acm_client.describe_certificate(CertificateArn=certificate_arn)
        self.logger.trace("describe_certificate response: %s", response)
        return CertificateDetail.model_validate(response['Certificate'])
