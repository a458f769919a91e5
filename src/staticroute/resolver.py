# Maps an untrusted request path onto a file below a base directory, or
# raises the rejection that explains why it can't be served.

import os
import posixpath
from collections import namedtuple

from staticroute.errors import DirectoryNotAllowed, ExtensionNotAllowed, FileNotExists


def split_query(request_path):
	'''
	Drop everything from the first '?' onward. A missing path is treated as
	the empty path.
	'''
	if request_path is None:
		return ""
	return request_path.partition("?")[0]


def file_extension(filename):
	'''
	The substring after the last dot of the filename, or "" if there is no
	dot. Dotfiles count: ".env" has the extension "env".
	'''
	head, dot, extension = filename.rpartition(".")
	return extension if dot else ""


class ResolvedTarget(namedtuple("ResolvedTarget", "directory filename extension")):
	__slots__ = ()

	@property
	def full_path(self):
		return f"{self.directory}{os.sep}{self.filename}"


class StaticFileResolver:
	def __init__(self, base_path, allowed_extensions):
		self.base_path = base_path
		self.allowed_extensions = tuple(allowed_extensions)

		# An empty entry would match every extensionless file, so it's
		# treated as a configuration mistake and never matched.
		self._allowed = frozenset(ext for ext in self.allowed_extensions if ext)

	def candidate_directory(self, directory):
		directory = directory.lstrip("/")
		if directory in ("", "."):
			return self.base_path
		return f"{self.base_path}{os.sep}{directory}"

	def check_directory(self, candidate):
		canonical = os.path.realpath(candidate)
		if canonical != candidate or not os.path.isdir(candidate):
			raise DirectoryNotAllowed(candidate, canonical)

	def is_extension_allowed(self, extension):
		# Exact, case-sensitive: "TXT" is not "txt".
		return extension in self._allowed

	def resolve(self, request_path) -> ResolvedTarget:
		'''
		Resolve a raw request path to a file that may be served, raising
		DirectoryNotAllowed, ExtensionNotAllowed or FileNotExists otherwise.

		The containment check is an equality test: the candidate directory is
		built by plain string joining, and must already be its own canonical
		form. Any '..' segment, doubled separator or symlinked directory makes
		the canonical path differ from the candidate, and the request is
		refused, whether or not the result would have landed inside the base.
		'''
		path = split_query(request_path)
		directory = self.candidate_directory(posixpath.dirname(path))
		filename = posixpath.basename(path)

		self.check_directory(directory)

		target = ResolvedTarget(directory, filename, file_extension(filename))

		if not self.is_extension_allowed(target.extension):
			raise ExtensionNotAllowed(target.full_path, target.extension)

		if not os.path.isfile(target.full_path):
			raise FileNotExists(target.full_path)

		return target
