import unittest

from secretrender.exceptions import ConfigurationError
from secretrender.options import RenderOptions, VarSource, resolve_options


class TestResolveOptions(unittest.TestCase):

    def _resolve(self, **kw):
        args = dict(template_file='config.tmpl', output_file='config.yml',
                    var_source='secretsmanager', secret_id='my-secret',
                    region='us-west-2')
        args.update(kw)
        return resolve_options(**args)

    def assertConfigError(self, message, **kw):
        with self.assertRaises(ConfigurationError) as cm:
            self._resolve(**kw)
        self.assertEqual(str(cm.exception), message)

    def test_valid(self):
        options = self._resolve()
        self.assertEqual(options.template_file, 'config.tmpl')
        self.assertEqual(options.output_file, 'config.yml')
        self.assertIs(options.var_source, VarSource.SECRETS_MANAGER)
        self.assertEqual(options.secret_id, 'my-secret')
        self.assertEqual(options.region, 'us-west-2')
        self.assertIsNone(options.endpoint_url)
        self.assertTrue(options.atomic)

    def test_missing_template_file(self):
        self.assertConfigError("templateFile argument is required",
                               template_file='')
        self.assertConfigError("templateFile argument is required",
                               template_file=None)

    def test_missing_output_file(self):
        self.assertConfigError("outputFile argument is required",
                               output_file='')

    def test_template_checked_before_output(self):
        self.assertConfigError("templateFile argument is required",
                               template_file='', output_file='')

    def test_bad_var_source(self):
        for source in ('none', 'ssm', 'SecretsManager', '', None):
            self.assertConfigError("varSource must be 'secretsmanager'",
                                   var_source=source)

    def test_missing_secret(self):
        self.assertConfigError(
            "secretArn is required when varSource is secretsmanager",
            secret_id='')

    def test_missing_region(self):
        self.assertConfigError(
            "region is required when varSource is secretsmanager",
            region='')

    def test_empty_endpoint_is_none(self):
        self.assertIsNone(self._resolve(endpoint_url='').endpoint_url)
        options = self._resolve(endpoint_url='http://localhost:5000')
        self.assertEqual(options.endpoint_url, 'http://localhost:5000')


class TestRenderOptions(unittest.TestCase):

    def test_frozen(self):
        options = RenderOptions('a', 'b', VarSource.SECRETS_MANAGER)
        with self.assertRaises(AttributeError):
            options.template_file = 'c'

    def test_describe(self):
        options = RenderOptions('a.tmpl', 'a.yml', VarSource.SECRETS_MANAGER,
                                secret_id='arn:secret', region='eu-west-1')
        self.assertEqual(list(options.describe()), [
            ("Template File", "a.tmpl"),
            ("Output File", "a.yml"),
            ("Variable Source", "secretsmanager"),
            ("Secret ARN", "arn:secret"),
            ("AWS Region", "eu-west-1"),
        ])
