from contextlib import asynccontextmanager
from typing import AsyncIterator

import aioboto3

from cert_provisioner.certificate_authority_client.certificate_authority_client import CertificateAuthorityClient
from cert_provisioner.dns_zone_client.dns_zone_client import DnsZoneClient


@asynccontextmanager
async def open_provisioning_clients(region: str, session: aioboto3.Session = None,
                                    log_level=None) -> AsyncIterator[tuple[CertificateAuthorityClient, DnsZoneClient]]:
    """
    Opens the ACM client (in the certificate's region) and the Route 53 client, closing both on exit.
    Credentials come from the default credential chain of the session.
    """
    if session is None:
        session = aioboto3.Session()
    async with session.client('acm', region_name=region) as acm_client:
        async with session.client('route53') as route53_client:
            yield (CertificateAuthorityClient(acm_client, log_level=log_level),
                   DnsZoneClient(route53_client, log_level=log_level))
