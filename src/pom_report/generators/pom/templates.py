"""XML templates for the dependency report."""

from textwrap import dedent

from pom_report.config import INCEPTION_YEAR, LICENSE_DISTRIBUTION, LICENSE_NAME, LICENSE_URL

INDENT = "  "

HEADER_TEMPLATE = dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <!--
    This file was generated by pom-report.
    It is not suitable for Maven builds: it only describes the first-level
    dependencies of the project and its subprojects. Transitive dependencies
    are not included.
    -->
    <project>
""")

FOOTER_TEMPLATE = "</project>\n"

IDENTITY_TEMPLATE = dedent("""\
    <groupId>{group_id}</groupId>
    <artifactId>{artifact_id}</artifactId>
    <version>{version}</version>
""")

INCEPTION_YEAR_BLOCK = f"<inceptionYear>{INCEPTION_YEAR}</inceptionYear>\n"

LICENSE_BLOCK = dedent(f"""\
    <licenses>
      <license>
        <name>{LICENSE_NAME}</name>
        <url>{LICENSE_URL}</url>
        <distribution>{LICENSE_DISTRIBUTION}</distribution>
      </license>
    </licenses>
""")

DEPENDENCIES_OPEN = "<dependencies>\n"

DEPENDENCIES_CLOSE = "</dependencies>\n"

EMPTY_DEPENDENCIES_BLOCK = "<dependencies/>\n"

DEPENDENCY_TEMPLATE = dedent("""\
    <dependency>
      <groupId>{group_id}</groupId>
      <artifactId>{artifact_id}</artifactId>
      <version>{version}</version>
      <scope>{scope}</scope>
    </dependency>
""")
