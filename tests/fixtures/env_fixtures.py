"""Environment and file metadata fixtures for tests."""
import pytest

from fileshare.models import File

TEST_SERVER_URL = "serverurl/"

# Every GOKAPI_* variable with a valid, non-default value
FULL_ENVIRON = {
    "GOKAPI_CONFIG_DIR": "/etc/gokapi",
    "GOKAPI_CONFIG_FILE": "settings.json",
    "GOKAPI_DATA_DIR": "/var/lib/gokapi",
    "GOKAPI_USERNAME": "admin",
    "GOKAPI_PASSWORD": "hunter2",
    "GOKAPI_PORT": "53842",
    "GOKAPI_LOCALHOST": "yes",
    "GOKAPI_EXTERNAL_URL": "https://files.example.com/",
    "GOKAPI_REDIRECT_URL": "https://example.com",
    "GOKAPI_SALT_ADMIN": "adminsalt",
    "GOKAPI_SALT_FILES": "filesalt",
    "GOKAPI_LENGTH_ID": "20",
    "GOKAPI_MAX_MEMORY_UPLOAD_MB": "40",
    "GOKAPI_USE_SSL": "false",
    "GOKAPI_AWS_BUCKET": "gokapi",
    "GOKAPI_AWS_REGION": "eu-central-1",
    "GOKAPI_AWS_KEY": "keyid",
    "GOKAPI_AWS_KEY_SECRET": "secret",
    "GOKAPI_AWS_ENDPOINT": "https://s3.example.com",
}

AWS_ENVIRON = {
    "GOKAPI_AWS_BUCKET": "gokapi",
    "GOKAPI_AWS_REGION": "eu-central-1",
    "GOKAPI_AWS_KEY": "keyid",
    "GOKAPI_AWS_KEY_SECRET": "secret",
}


@pytest.fixture
def full_environ():
    return dict(FULL_ENVIRON)


@pytest.fixture
def aws_environ():
    return dict(AWS_ENVIRON)


@pytest.fixture
def sample_file():
    return File(
        id="testId",
        name="testName",
        size="10 B",
        sha256="sha256",
        expire_at=50,
        expire_at_string="future",
        downloads_remaining=1,
        password_hash="pwhash",
        hotlink_id="hotlinkid",
        content_type="text/html",
    )
