import functools
import logging
import re

from aiohttp import web

logger = logging.getLogger(__name__)


# Just enough plumbing to put one route handler on aiohttp's low-level
# web.Server. Handlers are called as handler(request, **context). The
# wrappers are plain functions: they raise their HTTP errors before the
# wrapped coroutine is ever created.


def with_context(handler=None, **context):
	'''
	Bind extra keyword context to every call of the handler.
	'''
	if handler is None:
		return lambda handler: with_context(handler, **context)

	@functools.wraps(handler)
	def with_context_wrapper(request, **kwargs):
		kwargs.update(context)
		return handler(request, **kwargs)

	return with_context_wrapper


def allow_methods(*methods, handler=None):
	if handler is None:
		return lambda handler: allow_methods(*methods, handler=handler)

	allowed = frozenset(map(str.upper, methods))

	@functools.wraps(handler)
	def allow_methods_wrapper(request, **kwargs):
		if request.method.upper() not in allowed:
			raise web.HTTPMethodNotAllowed(method=request.method, allowed_methods=allowed)
		return handler(request, **kwargs)

	return allow_methods_wrapper


def prefix_pattern(prefix):
	'''
	Pattern for a mount prefix such as "/static/". It stops before the '/'
	that follows the prefix, so whatever comes after is still an absolute
	path. An empty or "/" prefix mounts at the root.
	'''
	prefix = prefix.strip("/")
	if not prefix:
		return r"(?=/)"
	return "/" + re.escape(prefix) + r"(?=/)"


def mount(prefix, handler=None):
	'''
	Serve every request path below `prefix` with the handler, which gets
	the rest of the path (starting with '/') as the `path` keyword. Other
	paths get a 404. Any character may follow the prefix, including a
	decoded newline.
	'''
	if handler is None:
		return lambda handler: mount(prefix, handler)

	pattern = re.compile(prefix_pattern(prefix) + r"(?P<path>/.*)\Z", re.DOTALL)

	@functools.wraps(handler)
	def mount_wrapper(request, **kwargs):
		match = pattern.match(request.rel_url.path)
		if match is None:
			raise web.HTTPNotFound()
		return handler(request, path=match["path"], **kwargs)

	return mount_wrapper


def log_requests(handler):
	@functools.wraps(handler)
	def log_requests_wrapper(request, **context):
		logger.info("%s %s", request.method, request.rel_url)
		return handler(request, **context)

	return log_requests_wrapper
