"""Configuration constants for pom-report."""

# Version
__version__ = "0.1.0"

# Output
DEFAULT_OUTPUT_FILE = "pom.xml"
"""File name used when no output path is given"""

OUTPUT_ENCODING = "utf-8"

# Static report blocks
INCEPTION_YEAR = "2015"
"""Year written to the <inceptionYear> block"""

LICENSE_NAME = "Apache License, Version 2.0"
LICENSE_URL = "https://www.apache.org/licenses/LICENSE-2.0"
LICENSE_DISTRIBUTION = "repo"

# Identity fallback keys (looked up in the descriptor's extra properties)
GROUP_ID_KEY = "groupId"
ARTIFACT_ID_KEY = "artifactId"
VERSION_KEY = "version"

# Gradle configuration name -> Maven scope
CONFIGURATION_SCOPES = {
    "api": "compile",
    "implementation": "compile",
    "compile": "compile",
    "runtimeOnly": "runtime",
    "runtime": "runtime",
    "testApi": "test",
    "testImplementation": "test",
    "testCompile": "test",
    "testCompileOnly": "test",
    "testRuntimeOnly": "test",
    "testRuntime": "test",
    "compileOnly": "provided",
    "compileOnlyApi": "provided",
    "annotationProcessor": "provided",
}
