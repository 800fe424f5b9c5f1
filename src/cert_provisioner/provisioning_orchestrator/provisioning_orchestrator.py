import asyncio
import time

from cert_provisioner.certificate_authority_client.certificate_authority_client import CertificateAuthorityClient
from cert_provisioner.common_domain.certificate_detail import ValidationChallenge
from cert_provisioner.common_domain.certificate_summary import CertificateSummary
from cert_provisioner.common_domain.change_request import ChangeRequest
from cert_provisioner.common_domain.domain_spec import DomainSpec
from cert_provisioner.common_domain.enum.provisioning_step import ProvisioningStep
from cert_provisioner.common_domain.enum.validation_method import ValidationMethod
from cert_provisioner.common_domain.provision_outcome import ProvisionOutcome, AlreadyExistsOutcome, \
    ProvisionedOutcome, DisabledOutcome
from cert_provisioner.common_domain.provisioning_errors import ListCertificatesFailedException, \
    RequestCertificateFailedException, DescribeCertificateFailedException, NoValidationChallengeException, \
    ValidationMetadataTimeoutException, DnsChangeFailedException
from cert_provisioner.dns_zone_client.dns_zone_client import DnsZoneClient
from cert_provisioner.logger_util import get_logger
from cert_provisioner.provisioning_orchestrator.existing_certificate_finder import ExistingCertificateFinder

logger = get_logger(__name__)


class ProvisioningOrchestratorConfiguration:
    def __init__(self, enabled=True, initial_settle_delay_seconds=2.0, poll_interval_seconds=2.0,
                 max_poll_interval_seconds=16.0, validation_metadata_timeout_seconds=300.0):
        self.enabled = enabled
        self.initial_settle_delay_seconds = initial_settle_delay_seconds
        self.poll_interval_seconds = poll_interval_seconds
        self.max_poll_interval_seconds = max_poll_interval_seconds
        self.validation_metadata_timeout_seconds = validation_metadata_timeout_seconds


class ProvisioningOrchestrator:
    """
    Provisions a DNS-validated certificate for a single domain:
    list -> (if absent) request -> wait for validation metadata -> describe -> create the DNS validation record.

    Steps run strictly in order and each failure is raised as a ProvisioningException naming the failed step.
    Nothing is retried or rolled back. Running again is the recovery path; a certificate that already exists for the
    domain is left alone (including one whose validation record was never created).
    """
    def __init__(self, certificate_authority_client: CertificateAuthorityClient, dns_zone_client: DnsZoneClient,
                 orchestrator_configuration: ProvisioningOrchestratorConfiguration, log_level=None):
        self.certificate_authority_client = certificate_authority_client
        self.dns_zone_client = dns_zone_client

        self.enabled = orchestrator_configuration.enabled
        self.initial_settle_delay_seconds = orchestrator_configuration.initial_settle_delay_seconds
        self.poll_interval_seconds = orchestrator_configuration.poll_interval_seconds
        self.max_poll_interval_seconds = orchestrator_configuration.max_poll_interval_seconds
        self.validation_metadata_timeout_seconds = orchestrator_configuration.validation_metadata_timeout_seconds

        self.logger = logger.getChild(self.__class__.__name__)
        if log_level is not None:
            self.logger.setLevel(log_level)

    async def provision(self, domain_spec: DomainSpec) -> ProvisionOutcome:
        if not self.enabled:
            self.logger.info("Custom domain is disabled.")
            return DisabledOutcome(domain_name=domain_spec.domain_name)

        domain_name = domain_spec.domain_name
        self.logger.info("Trying to create certificate for %s in %s ...", domain_name, domain_spec.region)

        existing_certificate = await self.find_existing_certificate(domain_spec)
        if existing_certificate is not None:
            self.logger.info("Certificate for %s in %s already exists (%s). Skipping ...",
                             domain_name, domain_spec.region, existing_certificate.certificate_arn)
            return AlreadyExistsOutcome(domain_name=domain_name, certificate=existing_certificate)

        certificate_arn = await self.request_certificate(domain_spec)
        challenge = await self.await_validation_challenge(domain_name, certificate_arn)

        change_request = ChangeRequest.from_validation_challenge(challenge, domain_spec)
        change_id = await self.apply_dns_change(domain_spec, change_request)
        self.logger.info("DNS validation record created for %s (change %s); the certificate will be issued "
                         "once the record has propagated.", domain_name, change_id)
        return ProvisionedOutcome(domain_name=domain_name, certificate_arn=certificate_arn, change_id=change_id)

    async def find_existing_certificate(self, domain_spec: DomainSpec) -> CertificateSummary | None:
        self.log_step(ProvisioningStep.LIST_CERTIFICATES, domain_spec.domain_name)
        try:
            certificate_summaries = await self.certificate_authority_client.list_certificates()
        except Exception as e:
            self.logger.error("Could not list certificates: %s", e)
            raise ListCertificatesFailedException(domain_spec.domain_name, e) from e
        return ExistingCertificateFinder.find_existing_certificate(certificate_summaries, domain_spec.domain_name)

    async def request_certificate(self, domain_spec: DomainSpec) -> str:
        self.log_step(ProvisioningStep.REQUEST_CERTIFICATE, domain_spec.domain_name)
        try:
            certificate_arn = await self.certificate_authority_client.request_certificate(
                domain_spec.domain_name, ValidationMethod.DNS, domain_spec.idempotency_token
            )
        except Exception as e:
            self.logger.error("Could not request certificate: %s", e)
            raise RequestCertificateFailedException(domain_spec.domain_name, e) from e
        self.logger.info("Requested certificate %s for %s.", certificate_arn, domain_spec.domain_name)
        return certificate_arn

    async def await_validation_challenge(self, domain_name: str, certificate_arn: str) -> ValidationChallenge:
        """
        Polls the certificate until the CA has generated the DNS validation record for its first domain validation
        option, backing off exponentially between attempts.
        :param domain_name: domain being provisioned (for errors and logs)
        :param certificate_arn: certificate returned by the request step
        :return: the validation challenge to publish
        :raises NoValidationChallengeException: the certificate has no domain validation options at all
        :raises ValidationMetadataTimeoutException: no validation record appeared within the configured timeout
        """
        self.log_step(ProvisioningStep.AWAIT_VALIDATION_METADATA, domain_name)
        await asyncio.sleep(self.initial_settle_delay_seconds)

        poll_interval = self.poll_interval_seconds
        tic = time.perf_counter()
        attempts = 1
        while True:
            challenge = await self.describe_validation_challenge(domain_name, certificate_arn)
            if challenge is not None:
                self.logger.debug("Validation metadata for %s available after %d attempt(s).",
                                  certificate_arn, attempts)
                return challenge

            elapsed = time.perf_counter() - tic
            if elapsed >= self.validation_metadata_timeout_seconds:
                self.logger.error("Gave up waiting for validation metadata of %s after %.2f seconds.",
                                  certificate_arn, elapsed)
                raise ValidationMetadataTimeoutException(domain_name, certificate_arn,
                                                         self.validation_metadata_timeout_seconds)

            delay = min(poll_interval, self.validation_metadata_timeout_seconds - elapsed)
            self.logger.debug("Validation metadata for %s not available yet; retrying in %.2f seconds.",
                              certificate_arn, delay)
            await asyncio.sleep(delay)
            poll_interval = min(poll_interval * 2, self.max_poll_interval_seconds)
            attempts += 1

    # Returns None while the CA has not yet generated the validation options or their record.
    async def describe_validation_challenge(self, domain_name: str, certificate_arn: str) -> ValidationChallenge | None:
        self.log_step(ProvisioningStep.DESCRIBE_CERTIFICATE, domain_name)
        try:
            certificate_detail = await self.certificate_authority_client.describe_certificate(certificate_arn)
        except Exception as e:
            self.logger.error("Could not get certificate info: %s", e)
            raise DescribeCertificateFailedException(domain_name, e) from e
        self.logger.debug("Got certificate info: %s", certificate_detail.model_dump_json())

        if certificate_detail.domain_validation_options is None:
            return None
        if len(certificate_detail.domain_validation_options) == 0:
            self.logger.error("Certificate %s has no DNS validation options.", certificate_arn)
            raise NoValidationChallengeException(domain_name, certificate_arn)

        first_validation_option = certificate_detail.domain_validation_options[0]
        if first_validation_option.resource_record is None:
            return None
        return ValidationChallenge.from_domain_validation_option(first_validation_option)

    async def apply_dns_change(self, domain_spec: DomainSpec, change_request: ChangeRequest) -> str:
        self.log_step(ProvisioningStep.APPLY_DNS_CHANGE, domain_spec.domain_name)
        try:
            return await self.dns_zone_client.apply_change(domain_spec.hosted_zone_id, change_request)
        except Exception as e:
            self.logger.error("Could not create record set for DNS validation: %s", e)
            raise DnsChangeFailedException(domain_spec.domain_name, e) from e

    def log_step(self, step: ProvisioningStep, domain_name: str):
        self.logger.trace("Provisioning %s: %s", domain_name, step)
