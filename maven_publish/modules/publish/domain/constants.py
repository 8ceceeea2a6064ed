"""Constants shared across the publish module."""

DESCRIPTOR_EXTENSION = ".pom"
DEFAULT_BINARY_TYPE = "jar"
CLASSIFIER_SEPARATOR = "-"

CHECKSUM_EXTENSIONS = (".md5", ".sha1", ".sha256", ".sha512")
IGNORED_EXTENSIONS = (DESCRIPTOR_EXTENSION,) + CHECKSUM_EXTENSIONS

# Maven only writes MD5 and SHA-1 by default, Gradle publishes all four
CHECKSUM_ALGORITHMS = ("MD5", "SHA-1", "SHA-256", "SHA-512")

DEPLOY_GOAL = "org.apache.maven.plugins:maven-deploy-plugin:deploy-file"
DEFAULT_RETRY_COUNT = 3

SETTINGS_FILE_NAME = "maven-settings.xml"
SERVER_ID = "remote-repository"
USERNAME_ENV = "REMOTE_REPO_USERNAME"
PASSWORD_ENV = "REMOTE_REPO_PASSWORD"

BAD_REQUEST_SIGNATURE = "status: 400 Bad Request"
