from maven_publish.modules.publish.discovery import read_coordinates

from conftest import write_family


def test_reads_project_coordinates_ignoring_dependencies(tmp_path):
    pom = write_family(tmp_path, "my-lib-1.0.0", group="com.example.libs", artifact="my-lib", version="1.0.0")

    coords = read_coordinates(pom)

    assert coords is not None
    assert (coords.groupid, coords.artifactid, coords.version) == ("com.example.libs", "my-lib", "1.0.0")
    assert coords.relative_path == "com/example/libs/my-lib/1.0.0/my-lib-1.0.0.jar"


def test_inherits_group_and_version_from_parent(tmp_path):
    pom = tmp_path / "child.pom"
    pom.write_text(
        """<project>
  <parent>
    <groupId>org.parent</groupId>
    <artifactId>parent-pom</artifactId>
    <version>2.1</version>
  </parent>
  <artifactId>child</artifactId>
</project>
""",
        encoding="utf-8",
    )

    coords = read_coordinates(pom, extension="war")

    assert coords is not None
    assert str(coords) == "org.parent:child:2.1"
    assert coords.path_segments[-1] == "child-2.1.war"


def test_malformed_descriptor_returns_none(tmp_path, caplog):
    pom = tmp_path / "broken.pom"
    pom.write_text("<project><groupId>x</project>", encoding="utf-8")

    assert read_coordinates(pom) is None
    assert "Cannot parse descriptor" in caplog.text


def test_missing_version_returns_none(tmp_path):
    pom = tmp_path / "partial.pom"
    pom.write_text("<project><groupId>a.b</groupId><artifactId>c</artifactId></project>", encoding="utf-8")

    assert read_coordinates(pom) is None
