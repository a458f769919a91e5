# Rejections raised while resolving and serving a static file. They carry
# enough context to be logged, but the dispatch point maps every one of them
# to the same bare 403, so none of this ever reaches a client.


class StaticFileError(Exception):
	reason = "static file error"

	@property
	def context(self):
		return {}

	def __str__(self):
		details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
		return f"{self.reason} ({details})" if details else self.reason


class DirectoryNotAllowed(StaticFileError):
	reason = "requested file folder is not allowed"

	def __init__(self, path, canonical_path=None):
		super().__init__(path, canonical_path)
		self.path = path
		self.canonical_path = canonical_path

	@property
	def context(self):
		return {"path": self.path, "canonical_path": self.canonical_path}


class ExtensionNotAllowed(StaticFileError):
	reason = "extension is not allowed"

	def __init__(self, path, extension):
		super().__init__(path, extension)
		self.path = path
		self.extension = extension

	@property
	def context(self):
		return {"path": self.path, "extension": self.extension}


class FileNotExists(StaticFileError):
	reason = "requested file does not exist"

	def __init__(self, path):
		super().__init__(path)
		self.path = path

	@property
	def context(self):
		return {"path": self.path}


class UnexpectedError(StaticFileError):
	'''
	Wraps any other exception raised while handling a route, so that the
	dispatch point only ever deals with StaticFileError.
	'''
	reason = "unexpected error"

	def __init__(self, cause):
		super().__init__(cause)
		self.cause = cause

	@property
	def context(self):
		return {"cause": self.cause}


class ResponseCommitted(RuntimeError):
	'''
	Raised when a sink is asked to change its status or headers after body
	bytes were already sent.
	'''
