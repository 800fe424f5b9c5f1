from cert_provisioner.common_domain.certificate_summary import CertificateSummary


class ExistingCertificateFinder:
    # Exact, case-sensitive match on the domain name; the first entry in listing order wins if there are several.
    @staticmethod
    def find_existing_certificate(certificate_summaries: list[CertificateSummary],
                                  domain_name: str) -> CertificateSummary | None:
        existing_certificates = [summary for summary in certificate_summaries if summary.domain_name == domain_name]
        if len(existing_certificates) > 0:
            return existing_certificates[0]
        return None
