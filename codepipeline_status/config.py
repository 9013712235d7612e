import base64
import binascii
import logging
import os

import boto3
from botocore.exceptions import ClientError


logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ARTIFACT_NAME = 'SourceCode'
DEFAULT_GITHUB_API_URL = 'https://api.github.com'


class ConfigurationError(RuntimeError):
    pass


def required(key):
    value = os.environ.get(key, '')
    if not value:
        raise ConfigurationError(f"required key {key} missing value")

    return value


def decode(value):
    try:
        ciphertext = base64.b64decode(value, validate=True)
    except binascii.Error:
        raise ConfigurationError('illegal base64 data in GITHUB_ACCESS_TOKEN')

    if not ciphertext:
        raise ConfigurationError('missing ciphertext in GITHUB_ACCESS_TOKEN')

    return ciphertext


def decrypt(region, ciphertext):
    client = boto3.client('kms', region_name=region)

    try:
        resp = client.decrypt(CiphertextBlob=ciphertext)
    except ClientError as e:
        raise ConfigurationError(f"Could not decrypt GITHUB_ACCESS_TOKEN: {e}")

    plaintext = resp['Plaintext'].decode('utf-8').strip()
    if not plaintext:
        raise ConfigurationError('GITHUB_ACCESS_TOKEN decrypted to an empty value')

    return plaintext


class Config:
    # Plaintext tokens survive warm Lambda invocations, keyed by ciphertext.
    _tokens = {}

    def __init__(self, region, github_token, stage_name,
            source_artifact_name=DEFAULT_SOURCE_ARTIFACT_NAME,
            github_api_url=DEFAULT_GITHUB_API_URL):
        self.region = region
        self.github_token = github_token
        self.stage_name = stage_name
        self.source_artifact_name = source_artifact_name
        self.github_api_url = github_api_url.rstrip('/')


    @classmethod
    def load(cls):
        region = required('AWS_REGION')
        encrypted = required('GITHUB_ACCESS_TOKEN')
        stage_name = required('APPLICATION_STAGE_NAME')

        if encrypted not in cls._tokens:
            logger.debug("Decrypting GITHUB_ACCESS_TOKEN with KMS in %s", region)
            cls._tokens[encrypted] = decrypt(region, decode(encrypted))

        return cls(
            region,
            cls._tokens[encrypted],
            stage_name,
            source_artifact_name=os.environ.get(
                'SOURCE_ARTIFACT_NAME') or DEFAULT_SOURCE_ARTIFACT_NAME,
            github_api_url=os.environ.get(
                'GITHUB_API_URL') or DEFAULT_GITHUB_API_URL)
