import abc
import logging

from staticroute.errors import StaticFileError, UnexpectedError
from staticroute.file_server import FileServer
from staticroute.resolver import StaticFileResolver

logger = logging.getLogger(__name__)


# The contract a router relies on: handlers are invoked with a response sink
# and the matched route parameters, and can be turned into plain data and
# back, so route tables can be stored as config.


class RoutedHandler(abc.ABC):
	@abc.abstractmethod
	async def on_route(self, sink, *parameters):
		raise NotImplementedError()

	@abc.abstractmethod
	def to_config(self):
		raise NotImplementedError()

	@classmethod
	def from_config(cls, config):
		return cls(*config)


class ServeStatic(RoutedHandler):
	'''
	Serve files with allow-listed extensions from below `base_path`.

	Every failure, whether a rejected path, a missing file or an I/O error,
	is answered with a bare 403. The client can't tell which check failed;
	the reason is only logged.
	'''
	def __init__(self, base_path, allowed_extensions, *, file_server=None):
		self.resolver = StaticFileResolver(base_path, allowed_extensions)
		self.file_server = FileServer() if file_server is None else file_server

	@property
	def base_path(self):
		return self.resolver.base_path

	@property
	def allowed_extensions(self):
		return self.resolver.allowed_extensions

	async def on_route(self, sink, request_path="", *parameters):
		try:
			target = self.resolver.resolve(request_path)
			await self.file_server.serve(target.full_path, sink)
		except StaticFileError as e:
			logger.info("Refused %r: %s", request_path, e)
			self.deny(sink)
		except Exception as e:
			logger.warning("Refused %r: %s", request_path, UnexpectedError(e), exc_info=e)
			self.deny(sink)

		await sink.finish()

	@staticmethod
	def deny(sink):
		# Raises ResponseCommitted if the body already started going out;
		# at that point the transport has to drop the connection.
		sink.reset()
		sink.set_status(403)

	def to_config(self):
		return [self.base_path, list(self.allowed_extensions)]


HANDLER_TYPES = {
	"serve_static": ServeStatic,
}


def handler_from_config(kind, config):
	'''
	Rebuild a handler from a (kind, config) pair, as produced by
	handler_to_config.
	'''
	try:
		handler_type = HANDLER_TYPES[kind]
	except KeyError as e:
		raise ValueError(f"Unknown route handler type: {kind!r}") from e

	return handler_type.from_config(config)


def handler_to_config(handler):
	for kind, handler_type in HANDLER_TYPES.items():
		if type(handler) is handler_type:
			return kind, handler.to_config()

	raise ValueError(f"Unregistered route handler type: {type(handler).__name__}")
