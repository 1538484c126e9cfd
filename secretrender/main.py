"""secret-render script"""
import sys
import argparse
from typing import Optional

from secretrender import __version__, logger
from secretrender.exceptions import SecretRenderException
from secretrender.options import RenderOptions, resolve_options
from secretrender.providers import VariableProvider, get_provider
from secretrender.templating import load_template, render
from secretrender.util import set_logger
from secretrender.writer import write_output


def _parse(sysargs=None):
    if sysargs is None:
        sysargs = sys.argv[1:]

    parser = argparse.ArgumentParser(
        description='Renders a template with variables from a secret store.')
    parser.add_argument('--templateFile', '-templateFile',
                        dest='template_file', type=str, default='',
                        help='The template file to use')
    parser.add_argument('--outputFile', '-outputFile', dest='output_file',
                        type=str, default='',
                        help='The output file to write')
    parser.add_argument('--varSource', '-varSource', dest='var_source',
                        type=str, default='none',
                        help='Source of template variables (secretsmanager)')
    parser.add_argument('--secretArn', '-secretArn', dest='secret_arn',
                        type=str, default='',
                        help='ARN or Alias of AWS Secrets Manager secret')
    parser.add_argument('--region', '-region', dest='region', type=str,
                        default='', help='AWS Region for the service')
    parser.add_argument('--endpointUrl', '-endpointUrl', dest='endpoint_url',
                        type=str, default=None,
                        help='Override the AWS service endpoint')
    parser.add_argument('--inPlace', '-inPlace', dest='in_place',
                        action='store_true', default=False,
                        help='Write straight into outputFile instead of '
                             'replacing it once rendering succeeded')
    parser.add_argument('--debug', help='Debug Info.', action='store_true',
                        default=False)
    parser.add_argument('--version', action='version',
                        version='%(prog)s ' + __version__)
    args = parser.parse_args(sysargs)
    return args, parser


def run(options: RenderOptions,
        provider: Optional[VariableProvider] = None) -> str:
    """Renders ``options.template_file`` into ``options.output_file``.

    The template is parsed before any variables are fetched, so a broken
    template never costs a network call.
    """
    template = load_template(options.template_file)

    if provider is None:
        provider = get_provider(options)
    variables = provider.fetch(provider.selector(options))

    write_output(options.output_file, render(template, variables),
                 atomic=options.atomic)
    return options.output_file


def main(sysargs=None):
    """Parses arguments and renders the template.

    Returns the process exit status.
    """
    args, parser = _parse(sysargs)
    set_logger(debug=args.debug)

    try:
        options = resolve_options(args.template_file, args.output_file,
                                  args.var_source,
                                  secret_id=args.secret_arn,
                                  region=args.region,
                                  endpoint_url=args.endpoint_url,
                                  atomic=not args.in_place)

        for label, value in options.describe():
            print('%s: %s' % (label, value))

        output_file = run(options)
    except SecretRenderException as exc:
        logger.error(str(exc))
        logger.debug('Render failed', exc_info=True)
        return 1

    print('Successfully rendered template to %s' % output_file)
    return 0


if __name__ == '__main__':
    sys.exit(main())
