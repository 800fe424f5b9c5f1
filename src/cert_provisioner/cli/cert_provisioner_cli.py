#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import argparse
import asyncio
import logging
import os
import sys

import pydantic

from cert_provisioner.common_domain.enum.provisioning_command import ProvisioningCommand
from cert_provisioner.common_domain.provisioning_errors import ProvisioningException, \
    ProvisioningConfigurationException
from cert_provisioner.logger_util import get_logger
from cert_provisioner.provisioning_commands import run_command
from cert_provisioner.provisioning_configuration import ProvisioningConfiguration

logger = get_logger(__name__)


def parse_args(raw_args):
    parser = argparse.ArgumentParser(prog='cert-provisioner',
                                     description='Creates a DNS-validated certificate for an existing hosted zone.')
    parser.add_argument("command", choices=[command.value for command in ProvisioningCommand])
    parser.add_argument("-c", "--config",
                        default=f"{os.getcwd()}/cert_provisioner.yaml")
    parser.add_argument("-l", "--log_level",
                        default="INFO")
    return parser.parse_args(raw_args)


# Main function. Optional raw_args array for specifying command line arguments in calls from other python scripts.
# If raw_args=None, argparse will get the arguments from the command line. Returns the process exit status.
def main(raw_args=None) -> int:
    args = parse_args(raw_args)
    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        configuration = ProvisioningConfiguration.from_yaml_file(args.config)
    except (OSError, ProvisioningConfigurationException, pydantic.ValidationError) as e:
        logger.error("Configuration error: %s", e)
        return 1

    command = ProvisioningCommand(args.command)
    try:
        result = asyncio.run(run_command(command, configuration))
    except ProvisioningException as e:
        logger.error("Provisioning failed at step '%s': %s", e.step, e)
        return 1

    if command == ProvisioningCommand.SUMMARY:
        for line in result:
            print(line)
    else:
        logger.info("Outcome: %s", result.model_dump_json())
    return 0


if __name__ == '__main__':
    sys.exit(main())
