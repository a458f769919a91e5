import abc

from aiohttp import web
from multidict import CIMultiDict

from staticroute.errors import ResponseCommitted


# The response side of a route handler. Status and headers are buffered until
# the first body write (or finish), so a handler that fails part way through
# can still be reset and answered with a clean status. Once the head has gone
# out, the response is committed and can only be continued or abandoned.


class ResponseSink(abc.ABC):
	def __init__(self):
		self.status = None
		self.headers = CIMultiDict()
		self.committed = False
		self.finished = False

	def _check_uncommitted(self):
		if self.committed:
			raise ResponseCommitted("response head was already sent")

	def set_status(self, code):
		self._check_uncommitted()
		self.status = code

	def set_header(self, name, value):
		self._check_uncommitted()
		self.headers[name] = str(value)

	def reset(self):
		'''
		Throw away any status and headers set so far.
		'''
		self._check_uncommitted()
		self.status = None
		self.headers.clear()

	async def write_body(self, data):
		if not self.committed:
			await self._commit()
			self.committed = True
		if data:
			await self._write(bytes(data))

	async def finish(self):
		if self.finished:
			return
		await self._finish()
		self.finished = True

	@abc.abstractmethod
	async def _commit(self):
		raise NotImplementedError()

	@abc.abstractmethod
	async def _write(self, data):
		raise NotImplementedError()

	@abc.abstractmethod
	async def _finish(self):
		raise NotImplementedError()


class MemorySink(ResponseSink):
	'''
	Collects the whole response in memory. Mostly useful for tests, and for
	callers that want the response as a value.
	'''
	def __init__(self):
		super().__init__()
		self.body = bytearray()

	async def _commit(self):
		pass

	async def _write(self, data):
		self.body.extend(data)

	async def _finish(self):
		self.committed = True


class AiohttpSink(ResponseSink):
	'''
	Drives an aiohttp response for the given request. A response that never
	writes a body is sent as a plain web.Response when finished; otherwise a
	StreamResponse is prepared on the first write. Either way, `response` is
	what the aiohttp handler should return.
	'''
	def __init__(self, request):
		super().__init__()
		self.request = request
		self.response = None

	def _status(self):
		return 500 if self.status is None else self.status

	async def _commit(self):
		# Only keep the response once its head went out; if prepare() refuses
		# the headers, the sink is still uncommitted and can be reset.
		response = web.StreamResponse(status=self._status(), headers=self.headers)
		await response.prepare(self.request)
		self.response = response

	async def _write(self, data):
		if self.request.method != "HEAD":
			await self.response.write(data)

	async def _finish(self):
		if self.response is None:
			self.response = web.Response(status=self._status(), headers=self.headers)
			self.committed = True
		else:
			await self.response.write_eof()
