import aioboto3

from cert_provisioner.common_domain.enum.provisioning_command import ProvisioningCommand
from cert_provisioner.common_domain.provision_outcome import ProvisionOutcome
from cert_provisioner.provisioning_clients import open_provisioning_clients
from cert_provisioner.provisioning_configuration import ProvisioningConfiguration
from cert_provisioner.provisioning_orchestrator.provisioning_orchestrator import ProvisioningOrchestrator
from cert_provisioner.summary_reporter.certificate_summary_reporter import CertificateSummaryReporter


async def create_certificate(configuration: ProvisioningConfiguration,
                             session: aioboto3.Session = None) -> ProvisionOutcome:
    domain_spec = configuration.to_domain_spec()
    async with open_provisioning_clients(domain_spec.region, session, configuration.log_level) as clients:
        certificate_authority_client, dns_zone_client = clients
        orchestrator = ProvisioningOrchestrator(certificate_authority_client, dns_zone_client,
                                                configuration.to_orchestrator_configuration(), configuration.log_level)
        return await orchestrator.provision(domain_spec)


async def certificate_summary(configuration: ProvisioningConfiguration,
                              session: aioboto3.Session = None) -> list[str]:
    domain_spec = configuration.to_domain_spec()
    async with open_provisioning_clients(domain_spec.region, session, configuration.log_level) as clients:
        certificate_authority_client, _ = clients
        reporter = CertificateSummaryReporter(certificate_authority_client, configuration.enabled,
                                              configuration.log_level)
        return await reporter.report(domain_spec)


async def run_command(command: ProvisioningCommand, configuration: ProvisioningConfiguration,
                      session: aioboto3.Session = None) -> ProvisionOutcome | list[str]:
    match command:
        case ProvisioningCommand.CREATE_CERTIFICATE:
            return await create_certificate(configuration, session)
        case ProvisioningCommand.SUMMARY:
            return await certificate_summary(configuration, session)
