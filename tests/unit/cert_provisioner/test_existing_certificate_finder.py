import pytest

from cert_provisioner.common_domain.certificate_summary import CertificateSummary
from cert_provisioner.provisioning_orchestrator.existing_certificate_finder import ExistingCertificateFinder


# noinspection PyMethodMayBeStatic
class TestExistingCertificateFinder:
    def find_existing_certificate__should_select_only_certificate_for_requested_domain(self):
        certificate_summaries = [
            CertificateSummary(certificate_arn='arn:cert:a', domain_name='a.example.com'),
            CertificateSummary(certificate_arn='arn:cert:b', domain_name='b.example.com'),
        ]
        existing_certificate = ExistingCertificateFinder.find_existing_certificate(certificate_summaries,
                                                                                   'b.example.com')
        assert existing_certificate.certificate_arn == 'arn:cert:b'

    def find_existing_certificate__should_return_first_in_listing_order_given_multiple_matches(self):
        certificate_summaries = [
            CertificateSummary(certificate_arn='arn:cert:1', domain_name='a.example.com'),
            CertificateSummary(certificate_arn='arn:cert:2', domain_name='a.example.com'),
        ]
        existing_certificate = ExistingCertificateFinder.find_existing_certificate(certificate_summaries,
                                                                                   'a.example.com')
        assert existing_certificate.certificate_arn == 'arn:cert:1'

    @pytest.mark.parametrize('listed_domain_name', ['A.example.com', 'www.a.example.com', 'a.example.com.', '*.example.com'])
    def find_existing_certificate__should_return_none_given_no_exact_match(self, listed_domain_name):
        certificate_summaries = [CertificateSummary(certificate_arn='arn:cert:1', domain_name=listed_domain_name)]
        assert ExistingCertificateFinder.find_existing_certificate(certificate_summaries, 'a.example.com') is None

    def find_existing_certificate__should_return_none_given_empty_listing(self):
        assert ExistingCertificateFinder.find_existing_certificate([], 'a.example.com') is None


if __name__ == '__main__':
    pytest.main()
