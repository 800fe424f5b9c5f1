from cert_provisioner.logger_util import get_logger, TRACE_LEVEL

from cert_provisioner.common_domain.enum.certificate_status import CertificateStatus
from cert_provisioner.common_domain.enum.change_action import ChangeAction
from cert_provisioner.common_domain.enum.provision_outcome_type import ProvisionOutcomeType
from cert_provisioner.common_domain.enum.provisioning_command import ProvisioningCommand
from cert_provisioner.common_domain.enum.provisioning_step import ProvisioningStep
from cert_provisioner.common_domain.enum.validation_method import ValidationMethod
from cert_provisioner.common_domain.messages.ErrorMessages import ProvisioningErrorMessages

from cert_provisioner.common_domain.domain_spec import DomainSpec
from cert_provisioner.common_domain.certificate_summary import CertificateSummary
from cert_provisioner.common_domain.certificate_detail import CertificateDetail, DomainValidationOption, \
    ValidationResourceRecord, ValidationChallenge
from cert_provisioner.common_domain.change_request import ChangeRequest
from cert_provisioner.common_domain.provision_outcome import ProvisionOutcome, AnnotatedProvisionOutcome, \
    AlreadyExistsOutcome, ProvisionedOutcome, DisabledOutcome
from cert_provisioner.common_domain.provisioning_errors import ProvisioningConfigurationException, \
    AmbiguousEnablementException, ProvisioningException, ListCertificatesFailedException, \
    RequestCertificateFailedException, DescribeCertificateFailedException, NoValidationChallengeException, \
    ValidationMetadataTimeoutException, DnsChangeFailedException

from cert_provisioner.certificate_authority_client.certificate_authority_client import CertificateAuthorityClient
from cert_provisioner.dns_zone_client.dns_zone_client import DnsZoneClient
from cert_provisioner.provisioning_orchestrator.existing_certificate_finder import ExistingCertificateFinder
from cert_provisioner.provisioning_orchestrator.provisioning_orchestrator import ProvisioningOrchestrator, \
    ProvisioningOrchestratorConfiguration
from cert_provisioner.summary_reporter.certificate_summary_reporter import CertificateSummaryReporter
from cert_provisioner.provisioning_configuration import ProvisioningConfiguration, evaluate_enabled
from cert_provisioner.provisioning_clients import open_provisioning_clients
from cert_provisioner.provisioning_commands import create_certificate, certificate_summary, run_command
