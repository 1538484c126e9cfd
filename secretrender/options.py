"""Convenience objects for render options"""
import enum
from typing import Optional

from attr import attrib, attrs

from secretrender.exceptions import ConfigurationError


class VarSource(enum.Enum):
    """Where template variables come from"""

    SECRETS_MANAGER = "secretsmanager"


@attrs(frozen=True)
class RenderOptions:
    """Validated options for a single render run"""

    template_file = attrib()  # type: str
    output_file = attrib()  # type: str
    var_source = attrib()  # type: VarSource
    secret_id = attrib(default=None)  # type: Optional[str]
    region = attrib(default=None)  # type: Optional[str]
    endpoint_url = attrib(default=None)  # type: Optional[str]
    atomic = attrib(default=True)  # type: bool

    def describe(self):
        """Yields (label, value) pairs echoed before a run"""
        yield "Template File", self.template_file
        yield "Output File", self.output_file
        yield "Variable Source", self.var_source.value
        if self.var_source is VarSource.SECRETS_MANAGER:
            yield "Secret ARN", self.secret_id
            yield "AWS Region", self.region


def resolve_options(template_file: Optional[str],
                    output_file: Optional[str],
                    var_source: Optional[str],
                    secret_id: Optional[str] = None,
                    region: Optional[str] = None,
                    endpoint_url: Optional[str] = None,
                    atomic: bool = True) -> RenderOptions:
    """Validates raw argument values and builds a :class:`RenderOptions`.

    Checks run in a fixed order and the first failure raises
    :class:`ConfigurationError`. Nothing here touches the network.

    """
    if not template_file:
        raise ConfigurationError("templateFile argument is required")

    if not output_file:
        raise ConfigurationError("outputFile argument is required")

    try:
        source = VarSource(var_source)
    except ValueError:
        raise ConfigurationError("varSource must be 'secretsmanager'")

    if source is VarSource.SECRETS_MANAGER:
        if not secret_id:
            raise ConfigurationError(
                "secretArn is required when varSource is secretsmanager")
        if not region:
            raise ConfigurationError(
                "region is required when varSource is secretsmanager")

    return RenderOptions(template_file=template_file,
                         output_file=output_file,
                         var_source=source,
                         secret_id=secret_id,
                         region=region,
                         endpoint_url=endpoint_url or None,
                         atomic=atomic)
