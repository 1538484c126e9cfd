import json
import os
import shutil
import tempfile
import unittest

import boto3


TEST_REGION = 'us-west-2'


def create_secret(name, value, region=TEST_REGION):
    """Stores ``value`` in the (mocked) Secrets Manager and returns its ARN.

    ``value`` is JSON encoded unless it already is a string.
    """
    if not isinstance(value, str):
        value = json.dumps(value)
    client = boto3.client('secretsmanager', region_name=region)
    return client.create_secret(Name=name, SecretString=value)['ARN']


class TempDirTestCase(unittest.TestCase):
    """Gives each test a scratch directory"""

    def setUp(self):
        super().setUp()
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)
        super().tearDown()

    def path(self, *parts):
        return os.path.join(self.tmpdir, *parts)

    def write_file(self, name, content):
        path = self.path(name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def read_file(self, name):
        with open(self.path(name), encoding='utf-8') as f:
            return f.read()
