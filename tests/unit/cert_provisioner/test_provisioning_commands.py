from unittest.mock import AsyncMock, call

import pytest

from cert_provisioner.common_domain.enum.provisioning_command import ProvisioningCommand
from cert_provisioner.common_domain.provision_outcome import ProvisionedOutcome, DisabledOutcome
from cert_provisioner.provisioning_clients import open_provisioning_clients
from cert_provisioner.provisioning_commands import run_command
from cert_provisioner.provisioning_configuration import ProvisioningConfiguration

from unit.test_util.mock_aioboto3_session_creator import MockAioboto3SessionCreator
from unit.test_util.mock_aws_response_creator import MockAwsResponseCreator
from unit.test_util.valid_domain_spec_creator import ValidDomainSpecCreator


# noinspection PyMethodMayBeStatic
class TestProvisioningCommands:
    @staticmethod
    def create_configuration(**overrides) -> ProvisioningConfiguration:
        settings = ValidDomainSpecCreator.create_valid_configuration_settings()
        settings.update({'region': 'eu-west-1', 'initial_settle_delay_seconds': 0, 'poll_interval_seconds': 0,
                         'max_poll_interval_seconds': 0})
        settings.update(overrides)
        return ProvisioningConfiguration.from_settings(settings)

    @staticmethod
    def create_aws_clients():
        acm_client = AsyncMock()
        acm_client.list_certificates.return_value = MockAwsResponseCreator.create_list_certificates_response()
        acm_client.request_certificate.return_value = {'CertificateArn': 'arn:cert:1'}
        acm_client.describe_certificate.return_value = MockAwsResponseCreator.create_describe_certificate_response(
            resource_record=MockAwsResponseCreator.create_resource_record()
        )
        route53_client = AsyncMock()
        route53_client.change_resource_record_sets.return_value = \
            MockAwsResponseCreator.create_change_resource_record_sets_response('chg-1')
        return acm_client, route53_client

    async def open_provisioning_clients__should_open_acm_in_configured_region_and_route53(self):
        acm_client, route53_client = self.create_aws_clients()
        session = MockAioboto3SessionCreator.create_session(acm_client, route53_client)
        async with open_provisioning_clients('eu-west-1', session) as (certificate_authority_client, dns_zone_client):
            assert certificate_authority_client.acm_client is acm_client
            assert dns_zone_client.route53_client is route53_client
        assert session.client.call_args_list == [call('acm', region_name='eu-west-1'), call('route53')]

    async def run_command__should_provision_certificate_end_to_end_given_create_command(self):
        acm_client, route53_client = self.create_aws_clients()
        session = MockAioboto3SessionCreator.create_session(acm_client, route53_client)
        outcome = await run_command(ProvisioningCommand.CREATE_CERTIFICATE, self.create_configuration(), session)
        assert outcome == ProvisionedOutcome(domain_name='cert.example.com', certificate_arn='arn:cert:1',
                                             change_id='chg-1')
        acm_client.request_certificate.assert_awaited_once_with(DomainName='cert.example.com', ValidationMethod='DNS')
        route53_client.change_resource_record_sets.assert_awaited_once()
        assert route53_client.change_resource_record_sets.await_args.kwargs['HostedZoneId'] == 'Z123'

    async def run_command__should_return_disabled_outcome_without_aws_calls_given_disabled_configuration(self):
        acm_client, route53_client = self.create_aws_clients()
        session = MockAioboto3SessionCreator.create_session(acm_client, route53_client)
        outcome = await run_command(ProvisioningCommand.CREATE_CERTIFICATE, self.create_configuration(enabled=False),
                                    session)
        assert outcome == DisabledOutcome(domain_name='cert.example.com')
        acm_client.list_certificates.assert_not_awaited()
        route53_client.change_resource_record_sets.assert_not_awaited()

    async def run_command__should_return_summary_lines_given_summary_command(self):
        acm_client, route53_client = self.create_aws_clients()
        acm_client.list_certificates.return_value = MockAwsResponseCreator.create_list_certificates_response(
            MockAwsResponseCreator.create_certificate_summary('cert.example.com', 'arn:cert:1')
        )
        session = MockAioboto3SessionCreator.create_session(acm_client, route53_client)
        summary_lines = await run_command(ProvisioningCommand.SUMMARY, self.create_configuration(), session)
        assert summary_lines == ['Certificate', '  arn:cert:1 => cert.example.com']
        route53_client.change_resource_record_sets.assert_not_awaited()


if __name__ == '__main__':
    pytest.main()
