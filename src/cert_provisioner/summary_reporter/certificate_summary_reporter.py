from cert_provisioner.certificate_authority_client.certificate_authority_client import CertificateAuthorityClient
from cert_provisioner.common_domain.domain_spec import DomainSpec
from cert_provisioner.common_domain.provisioning_errors import ListCertificatesFailedException
from cert_provisioner.logger_util import get_logger
from cert_provisioner.provisioning_orchestrator.existing_certificate_finder import ExistingCertificateFinder

logger = get_logger(__name__)

SUMMARY_TITLE = 'Certificate'


class CertificateSummaryReporter:
    def __init__(self, certificate_authority_client: CertificateAuthorityClient, enabled=True, log_level=None):
        self.certificate_authority_client = certificate_authority_client
        self.enabled = enabled

        self.logger = logger.getChild(self.__class__.__name__)
        if log_level is not None:
            self.logger.setLevel(log_level)

    async def report(self, domain_spec: DomainSpec) -> list[str]:
        if not self.enabled:
            self.logger.info("Custom domain is disabled.")
            return [SUMMARY_TITLE, f"  custom domain is disabled for {domain_spec.domain_name}"]

        try:
            certificate_summaries = await self.certificate_authority_client.list_certificates()
        except Exception as e:
            self.logger.error("Could not list certificates: %s", e)
            raise ListCertificatesFailedException(domain_spec.domain_name, e) from e
        existing_certificate = ExistingCertificateFinder.find_existing_certificate(certificate_summaries,
                                                                                   domain_spec.domain_name)
        if existing_certificate is None:
            summary_line = f"  no certificate found for {domain_spec.domain_name}"
        else:
            summary_line = f"  {existing_certificate.certificate_arn} => {existing_certificate.domain_name}"

        summary_lines = [SUMMARY_TITLE, summary_line]
        for line in summary_lines:
            self.logger.info(line)
        return summary_lines
