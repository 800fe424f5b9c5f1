import asyncio
import json
import traceback

from aws_lambda_powertools.utilities.parser import event_parser
from pydantic import BaseModel, ValidationError

from cert_provisioner import ProvisioningCommand
from cert_provisioner import ProvisioningConfiguration
from cert_provisioner import ProvisioningConfigurationException, ProvisioningException
from cert_provisioner import run_command
from cert_provisioner import get_logger

logger = get_logger(__name__)


class ProvisioningCommandEvent(BaseModel):
    command: ProvisioningCommand


class CertProvisionerLambdaHandler:
    # Configuration is read from the environment per invocation; an ambiguous 'enabled' value raises here,
    # before any AWS client is created.
    def __init__(self):
        self.configuration = ProvisioningConfiguration.from_environment()

        self.logger = logger.getChild(self.__class__.__name__)
        if self.configuration.log_level:
            self.logger.setLevel(self.configuration.log_level)

    def process_invocation(self, event: ProvisioningCommandEvent) -> dict:
        self.logger.debug("Processing %s command for %s", event.command, self.configuration.certificate_name)
        result = asyncio.run(run_command(event.command, self.configuration))
        if event.command == ProvisioningCommand.SUMMARY:
            body = json.dumps({'summary': result})
        else:
            body = result.model_dump_json()
        return {
            'statusCode': 200,
            'headers': {'Content-Type': 'application/json'},
            'body': body,
        }


def handle_lambda_exceptions(func):
    def build_response(status_code, body):
        return {
            'statusCode': status_code,
            'headers': {'Content-Type': 'application/json'},
            'body': json.dumps(body),
        }

    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ProvisioningConfigurationException as e:
            logger.error(f"Configuration error: {str(e)}")
            return build_response(400, {'error': getattr(e, 'error_type', 'configuration-error'), 'message': str(e)})
        except ValidationError as validation_error:
            return build_response(400, {'error': 'request-validation-failed',
                                        'validation_issues': validation_error.errors(include_url=False,
                                                                                     include_context=False)})
        except ProvisioningException as e:
            logger.error(f"Provisioning failed at step '{e.step}': {str(e)}")
            return build_response(500, {'error': e.error_type, 'step': e.step.value, 'message': str(e)})
        except Exception as e:
            logger.error(f"An error occurred: {str(e)}")
            print(traceback.format_exc())
            return build_response(500, {'error': str(e)})

    return wrapper


# noinspection PyUnusedLocal
# for now, we are not using context, but it is required by the lambda handler signature
@handle_lambda_exceptions
@event_parser(model=ProvisioningCommandEvent)  # AWS Lambda Powertools decorator
def lambda_handler(event: ProvisioningCommandEvent, context):  # AWS Lambda entry point
    return CertProvisionerLambdaHandler().process_invocation(event)
