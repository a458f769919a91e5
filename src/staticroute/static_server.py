# Adapts a ServeStatic route handler to an aiohttp request.

from staticroute import web_util
from staticroute.sink import AiohttpSink


@web_util.allow_methods('GET', 'HEAD')
async def static_file_handler(request, *, static_handler, path):
	# The handler does its own query stripping, so it gets the path the way
	# the client sent it.
	if request.query_string:
		path = f"{path}?{request.query_string}"

	sink = AiohttpSink(request)
	await static_handler.on_route(sink, path)
	return sink.response


def make_handler(static_handler, prefix="/static/"):
	return web_util.log_requests(
		web_util.mount(prefix, web_util.with_context(
			static_file_handler,
			static_handler=static_handler,
		))
	)
