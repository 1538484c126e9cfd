"""secret-render Exceptions"""


class SecretRenderException(Exception):
    """Base secret-render Exception class"""


class ConfigurationError(SecretRenderException):
    """Raised when the command line arguments are invalid"""


class ProviderError(SecretRenderException):
    """Raised when template variables can't be fetched"""


class CredentialsError(ProviderError):
    """Raised when no usable AWS credentials are found"""


class PayloadError(ProviderError):
    """Raised when a secret payload is not a JSON object"""


class TemplateParseError(SecretRenderException):
    """Raised when a template can't be loaded or parsed"""


class TemplateRenderError(SecretRenderException):
    """Raised when a template fails during rendering"""


class MissingVariableError(TemplateRenderError):
    """Raised when a template references an undefined variable"""


class OutputError(SecretRenderException):
    """Raised when the output file can't be created or written"""
