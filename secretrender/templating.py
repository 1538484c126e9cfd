"""Strict Jinja2 template loading and rendering

Templates are rendered with :class:`jinja2.StrictUndefined`: referencing
a variable that isn't in the mapping is an error, never an empty string.

Go-style leading-dot references (``{{.app}}``, ``{{ .db.host }}``) are
accepted as plain variable references so existing templates keep working.

"""
import os
import re
from typing import Any, Dict, Iterator

import jinja2
from jinja2.ext import Extension

from secretrender import logger
from secretrender.exceptions import (MissingVariableError, TemplateParseError,
                                     TemplateRenderError)


class DotReferenceExtension(Extension):
    """Drops the leading dot of ``{{ .name.path | filter }}`` expressions.

    Only the reference opening the expression is rewritten, Go's bare
    ``{{.}}`` has no equivalent.
    """

    pattern = re.compile(r'\{\{(-?)\s*\.(?=[A-Za-z_])')

    def preprocess(self, source, name, filename=None):
        return self.pattern.sub(r'{{\1 ', source)


def create_environment(search_path: str) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(search_path),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        extensions=[DotReferenceExtension])


def load_template(path: str) -> jinja2.Template:
    """Parses the template file at ``path``.

    The file's directory is the loader root, so ``{% include %}`` and
    ``{% extends %}`` resolve against sibling files.

    """
    path = os.path.abspath(path)
    env = create_environment(os.path.dirname(path))
    try:
        template = env.get_template(os.path.basename(path))
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateParseError(
            "Failed to parse template file: %s:%s: %s" %
            (exc.filename or path, exc.lineno, exc.message)) from exc
    except jinja2.TemplateNotFound as exc:
        raise TemplateParseError(
            "Failed to parse template file: %s not found" % exc) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateParseError(
            "Failed to parse template file: %s" % exc) from exc

    logger.debug('Parsed template %s' % path)
    return template


def render(template: jinja2.Template,
           variables: Dict[str, Any]) -> Iterator[str]:
    """Yields rendered chunks of ``template``.

    Rendering is lazy; errors surface while the chunks are consumed.
    """
    try:
        yield from template.generate(variables)
    except jinja2.UndefinedError as exc:
        raise MissingVariableError(
            "Template execution failed - missing key in template "
            "variables: %s" % exc.message) from exc
    except jinja2.TemplateSyntaxError as exc:
        # included templates are only parsed at render time
        raise TemplateParseError(
            "Failed to parse template file: %s:%s: %s" %
            (exc.filename, exc.lineno, exc.message)) from exc
    except Exception as exc:
        raise TemplateRenderError(
            "Failed to execute template: %s" % exc) from exc


def render_to_string(template: jinja2.Template,
                     variables: Dict[str, Any]) -> str:
    return ''.join(render(template, variables))
