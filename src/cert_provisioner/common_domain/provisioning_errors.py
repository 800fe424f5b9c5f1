from cert_provisioner.common_domain.enum.provisioning_step import ProvisioningStep
from cert_provisioner.common_domain.messages.ErrorMessages import ProvisioningErrorMessages


class ProvisioningConfigurationException(Exception):
    pass


class AmbiguousEnablementException(ProvisioningConfigurationException):
    def __init__(self, enabled_value):
        self.enabled_value = enabled_value
        self.error_type = ProvisioningErrorMessages.AMBIGUOUS_ENABLEMENT.key
        super().__init__(ProvisioningErrorMessages.AMBIGUOUS_ENABLEMENT.message.format(enabled_value))


class ProvisioningException(Exception):
    """
    Raised when a step of the provisioning workflow fails. The failed step is available as `step`, the underlying
    error (if any) as `cause`. Nothing is rolled back; running the workflow again is the way to recover.
    """
    step: ProvisioningStep
    error_message: ProvisioningErrorMessages

    def __init__(self, domain_name: str, *message_args):
        self.domain_name = domain_name
        self.error_type = self.error_message.key
        super().__init__(self.error_message.message.format(domain_name, *message_args))

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class ListCertificatesFailedException(ProvisioningException):
    step = ProvisioningStep.LIST_CERTIFICATES
    error_message = ProvisioningErrorMessages.LIST_CERTIFICATES_FAILED


class RequestCertificateFailedException(ProvisioningException):
    step = ProvisioningStep.REQUEST_CERTIFICATE
    error_message = ProvisioningErrorMessages.REQUEST_CERTIFICATE_FAILED


class DescribeCertificateFailedException(ProvisioningException):
    step = ProvisioningStep.DESCRIBE_CERTIFICATE
    error_message = ProvisioningErrorMessages.DESCRIBE_CERTIFICATE_FAILED


class NoValidationChallengeException(ProvisioningException):
    step = ProvisioningStep.DESCRIBE_CERTIFICATE
    error_message = ProvisioningErrorMessages.NO_VALIDATION_CHALLENGE


class ValidationMetadataTimeoutException(ProvisioningException):
    step = ProvisioningStep.AWAIT_VALIDATION_METADATA
    error_message = ProvisioningErrorMessages.VALIDATION_METADATA_TIMEOUT


class DnsChangeFailedException(ProvisioningException):
    step = ProvisioningStep.APPLY_DNS_CHANGE
    error_message = ProvisioningErrorMessages.DNS_CHANGE_FAILED
