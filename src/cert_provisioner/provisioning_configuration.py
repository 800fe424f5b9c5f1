import os
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from cert_provisioner.common_domain.domain_spec import DomainSpec
from cert_provisioner.common_domain.provisioning_errors import AmbiguousEnablementException, \
    ProvisioningConfigurationException
from cert_provisioner.provisioning_orchestrator.provisioning_orchestrator import ProvisioningOrchestratorConfiguration

DEFAULT_REGION = 'us-east-1'
CONFIGURATION_SECTION = 'custom_certificate'


def evaluate_enabled(enabled) -> bool:
    """
    Resolves the tri-state 'enabled' setting. Absent (None) means enabled; booleans are taken as is, as are the
    strings 'true' and 'false'. Anything else is rejected.
    """
    if enabled is None:
        return True
    if isinstance(enabled, bool):
        return enabled
    if isinstance(enabled, str) and enabled == 'true':
        return True
    if isinstance(enabled, str) and enabled == 'false':
        return False
    raise AmbiguousEnablementException(enabled)


class ProvisioningConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    certificate_name: str
    hosted_zone_id: str
    region: str = DEFAULT_REGION
    idempotency_token: str | None = None
    enabled: bool = True
    initial_settle_delay_seconds: float = 2.0
    poll_interval_seconds: float = 2.0
    max_poll_interval_seconds: float = 16.0
    validation_metadata_timeout_seconds: float = 300.0
    log_level: str | None = None

    # AmbiguousEnablementException is not a ValueError, so pydantic lets it through unwrapped.
    @field_validator('enabled', mode='before')
    @classmethod
    def resolve_enabled(cls, value):
        return evaluate_enabled(value)

    @field_validator('region', mode='before')
    @classmethod
    def default_region_if_blank(cls, value):
        return value or DEFAULT_REGION

    def to_domain_spec(self) -> DomainSpec:
        return DomainSpec(
            domain_name=self.certificate_name,
            region=self.region,
            hosted_zone_id=self.hosted_zone_id,
            idempotency_token=self.idempotency_token,
        )

    def to_orchestrator_configuration(self) -> ProvisioningOrchestratorConfiguration:
        return ProvisioningOrchestratorConfiguration(
            enabled=self.enabled,
            initial_settle_delay_seconds=self.initial_settle_delay_seconds,
            poll_interval_seconds=self.poll_interval_seconds,
            max_poll_interval_seconds=self.max_poll_interval_seconds,
            validation_metadata_timeout_seconds=self.validation_metadata_timeout_seconds,
        )

    @staticmethod
    def from_settings(settings: Mapping[str, Any]) -> 'ProvisioningConfiguration':
        # 'enabled' is resolved first so that an ambiguous value is reported even if other settings are missing
        evaluate_enabled(settings.get('enabled'))
        return ProvisioningConfiguration.model_validate(dict(settings))

    @staticmethod
    def from_yaml_file(config_path: str) -> 'ProvisioningConfiguration':
        with open(config_path) as stream:
            try:
                config = yaml.safe_load(stream) or {}
            except yaml.YAMLError as exc:
                raise ProvisioningConfigurationException(f"Error loading YAML config at {config_path}: {exc}") from exc
        if not isinstance(config, dict):
            raise ProvisioningConfigurationException(f"YAML config at {config_path} must be a mapping.")
        settings = config.get(CONFIGURATION_SECTION, config)
        if not isinstance(settings, dict):
            raise ProvisioningConfigurationException(
                f"Section '{CONFIGURATION_SECTION}' of YAML config at {config_path} must be a mapping.")
        return ProvisioningConfiguration.from_settings(settings)

    @staticmethod
    def from_environment(environ: Mapping[str, str] = None) -> 'ProvisioningConfiguration':
        if environ is None:
            environ = os.environ
        settings = {field_name: environ[field_name] for field_name in ProvisioningConfiguration.model_fields
                    if field_name in environ}
        return ProvisioningConfiguration.from_settings(settings)
