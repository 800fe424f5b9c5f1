from unittest.mock import AsyncMock, MagicMock


class MockAioboto3SessionCreator:
    # session.client(service_name, ...) returns an async context manager yielding the matching mock client
    @staticmethod
    def create_session(acm_client, route53_client):
        clients_by_service = {'acm': acm_client, 'route53': route53_client}

        def create_client_context(service_name, **kwargs):
            client_context = MagicMock()
            client_context.__aenter__ = AsyncMock(return_value=clients_by_service[service_name])
            client_context.__aexit__ = AsyncMock(return_value=False)
            return client_context

        session = MagicMock()
        session.client.side_effect = create_client_context
        return session
