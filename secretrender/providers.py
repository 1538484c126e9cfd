"""Template variable providers

A provider turns a selector (a secret ARN, a parameter path...) into the
mapping a template is rendered against. Every provider returns a plain
``dict`` parsed from JSON, so the rendering pipeline doesn't care where
the values came from.

:class:`SecretsManagerProvider` is the only implementation. Providers are
looked up by :class:`~secretrender.options.VarSource` in :data:`PROVIDERS`
and new sources only need to register there.

"""
import json
from typing import Any, Dict

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from botocore.exceptions import (NoCredentialsError, PartialCredentialsError,
                                 CredentialRetrievalError)

from secretrender import logger
from secretrender.exceptions import (CredentialsError, PayloadError,
                                     ProviderError)
from secretrender.options import RenderOptions, VarSource


CREDENTIAL_ERRORS = (NoCredentialsError, PartialCredentialsError,
                     CredentialRetrievalError)


def parse_payload(payload: str) -> Dict[str, Any]:
    """Parses a JSON payload that must hold an object at the top level."""
    try:
        variables = json.loads(payload)
    except ValueError as exc:
        raise PayloadError("Failed to parse secret JSON: %s" % exc) from exc

    if not isinstance(variables, dict):
        raise PayloadError(
            "Failed to parse secret JSON: expected an object, got %s" %
            type(variables).__name__)

    # lone surrogate escapes parse fine but can never be written out
    try:
        json.dumps(variables, ensure_ascii=False).encode('utf-8')
    except UnicodeEncodeError as exc:
        raise PayloadError("Failed to parse secret JSON: %s" % exc) from exc
    return variables


class VariableProvider:
    """Base class for template variable sources"""

    @classmethod
    def from_options(cls, options: RenderOptions, **kw):
        raise NotImplementedError()

    def selector(self, options: RenderOptions) -> str:
        """Returns what :meth:`fetch` should be called with."""
        raise NotImplementedError()

    def fetch(self, selector: str) -> Dict[str, Any]:
        raise NotImplementedError()


class SecretsManagerProvider(VariableProvider):
    """Fetches variables from an AWS Secrets Manager JSON secret.

    Credentials are resolved by boto3 (environment, shared credentials
    file, instance or task role) for the given region. One
    ``GetSecretValue`` call is made per fetch, nothing is retried or
    cached.

    """
    service_name = 'secretsmanager'

    def __init__(self, region, endpoint_url=None, session=None):
        self.region = region
        self.endpoint_url = endpoint_url
        self.session = session
        self._client = None

    @classmethod
    def from_options(cls, options, **kw):
        return cls(options.region, endpoint_url=options.endpoint_url, **kw)

    def selector(self, options):
        return options.secret_id

    @property
    def client(self):
        if self._client is None:
            try:
                if self.session is None:
                    self.session = boto3.session.Session(
                        region_name=self.region)
                self._client = self.session.client(
                    self.service_name, region_name=self.region,
                    endpoint_url=self.endpoint_url)
            except BotoCoreError as exc:
                raise ProviderError(
                    "Failed to load AWS configuration: %s" % exc) from exc
        return self._client

    def get_secret_string(self, secret_id: str) -> str:
        """Returns the raw SecretString of a secret."""
        logger.debug('Fetching secret %s in %s' % (secret_id, self.region))
        try:
            result = self.client.get_secret_value(SecretId=secret_id)
        except CREDENTIAL_ERRORS as exc:
            raise CredentialsError(
                "Failed to load AWS credentials: %s" % exc) from exc
        except (ClientError, BotoCoreError) as exc:
            raise ProviderError(
                "Failed to get secret value: %s" % exc) from exc

        payload = result.get('SecretString')
        if payload is None:
            raise PayloadError(
                "Failed to parse secret JSON: secret %s has no SecretString "
                "(binary secrets are not supported)" % secret_id)
        return payload

    def fetch(self, selector):
        variables = parse_payload(self.get_secret_string(selector))
        logger.debug('Loaded %d template variables' % len(variables))
        return variables


PROVIDERS = {
    VarSource.SECRETS_MANAGER: SecretsManagerProvider,
}


def get_provider(options: RenderOptions, **kw) -> VariableProvider:
    """Builds the provider registered for ``options.var_source``."""
    try:
        provider_class = PROVIDERS[options.var_source]
    except KeyError:
        raise ProviderError("No variable provider for %s" %
                            options.var_source.value)
    return provider_class.from_options(options, **kw)
