import os

import pytest

from staticroute.errors import DirectoryNotAllowed, ExtensionNotAllowed, FileNotExists
from staticroute.resolver import StaticFileResolver, file_extension, split_query


@pytest.fixture
def resolver(tree):
	return StaticFileResolver(tree.base, ["txt", "png", "env"])


@pytest.mark.parametrize("filename, extension", [
	("report.txt", "txt"),
	("archive.tar.gz", "gz"),
	(".env", "env"),
	("README", ""),
	("trailing.", ""),
	("", ""),
])
def test_file_extension(filename, extension):
	assert file_extension(filename) == extension


def test_split_query():
	assert split_query("/files/report.txt?download=1&x=?") == "/files/report.txt"
	assert split_query("/files/report.txt") == "/files/report.txt"
	assert split_query("?download=1") == ""
	assert split_query(None) == ""


def test_resolve_file_in_base(tree, resolver):
	target = resolver.resolve("/report.txt")

	assert target.directory == tree.base
	assert target.filename == "report.txt"
	assert target.extension == "txt"
	assert target.full_path == tree.path("report.txt")


def test_resolve_without_leading_slash(tree, resolver):
	assert resolver.resolve("report.txt").full_path == tree.path("report.txt")


def test_resolve_nested_file(tree, resolver):
	assert resolver.resolve("/files/report.txt").full_path == tree.path("files", "report.txt")


def test_query_string_is_ignored(resolver):
	assert resolver.resolve("/files/report.txt?download=1") == resolver.resolve("/files/report.txt")


@pytest.mark.parametrize("request_path", [
	"/../secret.txt",
	"../secret.txt",
	"/../../etc/passwd.txt",
	"/files/../report.txt",
	"/missing/report.txt",
	"/escape/secret.txt",
	"/report.txt/report.txt",
])
def test_directory_outside_or_non_canonical_is_rejected(resolver, request_path):
	with pytest.raises(DirectoryNotAllowed):
		resolver.resolve(request_path)


def test_directory_rejection_carries_context(tree, resolver):
	with pytest.raises(DirectoryNotAllowed) as info:
		resolver.resolve("/../secret.txt")

	assert info.value.path == tree.base + os.sep + ".."
	assert info.value.canonical_path == os.path.join(tree.root, "srv")


@pytest.mark.parametrize("request_path, extension", [
	("/report.pdf", "pdf"),
	("/UPPER.TXT", "TXT"),
	("/README", ""),
	("/files", ""),
	("/", ""),
	("", ""),
	(None, ""),
	("/files/", ""),
])
def test_extension_not_allowed(resolver, request_path, extension):
	with pytest.raises(ExtensionNotAllowed) as info:
		resolver.resolve(request_path)

	assert info.value.extension == extension


def test_extension_match_is_case_sensitive(tree):
	resolver = StaticFileResolver(tree.base, ["TXT"])

	assert resolver.resolve("/UPPER.TXT").full_path == tree.path("UPPER.TXT")
	with pytest.raises(ExtensionNotAllowed):
		resolver.resolve("/report.txt")


def test_empty_extension_entry_never_matches(tree):
	resolver = StaticFileResolver(tree.base, ["", "txt"])

	with pytest.raises(ExtensionNotAllowed):
		resolver.resolve("/README")

	assert resolver.allowed_extensions == ("", "txt")


def test_dotfile_extension_is_after_the_dot(tree, resolver):
	assert resolver.resolve("/.env").full_path == tree.path(".env")


def test_missing_file_with_allowed_extension(tree, resolver):
	with pytest.raises(FileNotExists) as info:
		resolver.resolve("/nothere.txt")

	assert info.value.path == tree.path("nothere.txt")


def test_directory_with_allowed_extension_is_not_a_file(resolver):
	with pytest.raises(FileNotExists):
		resolver.resolve("/docs.txt")


def test_non_canonical_base_rejects_everything(tree):
	resolver = StaticFileResolver(tree.base + "/", ["txt"])

	with pytest.raises(DirectoryNotAllowed):
		resolver.resolve("/files/report.txt")


def test_missing_base_is_only_checked_on_use(tree):
	resolver = StaticFileResolver(tree.path("gone"), ["txt"])

	with pytest.raises(DirectoryNotAllowed):
		resolver.resolve("/report.txt")
