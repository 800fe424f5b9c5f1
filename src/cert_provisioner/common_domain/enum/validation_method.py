from enum import StrEnum


class ValidationMethod(StrEnum):
    DNS = 'DNS'
