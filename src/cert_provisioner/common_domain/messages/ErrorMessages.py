from enum import Enum


class ProvisioningErrorMessages(Enum):
    AMBIGUOUS_ENABLEMENT = ('cert_provisioner_error:configuration:ambiguous_enablement', "Ambiguous enablement boolean: '{0}'")
    LIST_CERTIFICATES_FAILED = ('cert_provisioner_error:certificate_authority:list', 'Could not list certificates while provisioning {0}: {1}')
    REQUEST_CERTIFICATE_FAILED = ('cert_provisioner_error:certificate_authority:request', 'Could not request a certificate for {0}: {1}')
    DESCRIBE_CERTIFICATE_FAILED = ('cert_provisioner_error:certificate_authority:describe', 'Could not describe certificate for {0}: {1}')
    NO_VALIDATION_CHALLENGE = ('cert_provisioner_error:certificate_authority:no_validation_challenge', 'Certificate {1} for {0} has no DNS validation options.')
    VALIDATION_METADATA_TIMEOUT = ('cert_provisioner_error:certificate_authority:validation_metadata_timeout', 'Certificate {1} for {0} did not expose a validation record within {2} seconds.')
    DNS_CHANGE_FAILED = ('cert_provisioner_error:dns_zone:change', 'Could not create the DNS validation record for {0}: {1}')

    def __init__(self, key, message):
        self.key = key
        self.message = message
