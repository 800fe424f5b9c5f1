from cert_provisioner.common_domain.change_request import ChangeRequest
from cert_provisioner.logger_util import get_logger

logger = get_logger(__name__)


class DnsZoneClient:
    # route53_client: an (already opened) aioboto3 Route 53 client. Errors are not caught here.
    def __init__(self, route53_client, log_level=None):
        self.route53_client = route53_client

        self.logger = logger.getChild(self.__class__.__name__)
        if log_level is not None:
            self.logger.setLevel(log_level)

    async def apply_change(self, hosted_zone_id: str, change_request: ChangeRequest) -> str:
        response = await self.route53_client.change_resource_record_sets(
            HostedZoneId=hosted_zone_id,
            ChangeBatch=change_request.to_change_batch(),
        )
        self.logger.debug("change_resource_record_sets response: %s", response)
        return response['ChangeInfo']['Id']
