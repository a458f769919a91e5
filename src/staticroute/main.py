import asyncio
import logging
import os
import pathlib

from aiohttp import web
from autocommand import autocommand

from staticroute.handler import ServeStatic
from staticroute.static_server import make_handler

DEFAULT_EXTENSIONS = "html,css,js,json,txt,png,jpg,jpeg,gif,svg,ico,woff,woff2"


def parse_extensions(extensions):
	'''
	Split a comma separated extension list. Leading dots are tolerated, but
	case is kept as given, since matching is case-sensitive.
	'''
	return [
		ext.strip().lstrip(".")
		for ext in extensions.split(",")
		if ext.strip().lstrip(".")
	]


async def serve(handler, host, port):
	http_server = web.Server(handler)
	loop = asyncio.get_running_loop()
	server = await loop.create_server(http_server, host, port)

	async with server:
		await server.serve_forever()


@autocommand(__name__)
def main(
	static_dir: pathlib.Path =pathlib.Path(os.environ.get("STATICROUTE_DIR", "./static")),
	extensions: str =DEFAULT_EXTENSIONS,
	prefix="/static/",
	host="0.0.0.0",
	port=8080,
	verbose: bool =False,
):
	'''
	Serve the files in STATIC_DIR under PREFIX, limited to the given
	comma separated list of extensions.
	'''
	logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

	static_dir = static_dir.resolve()
	if not static_dir.is_dir():
		return "--static-dir must be a directory"

	allowed = parse_extensions(extensions)
	if not allowed:
		return "--extensions must name at least one extension"

	handler = make_handler(ServeStatic(str(static_dir), allowed), prefix=prefix)

	logging.getLogger(__name__).info(
		"Serving %s under %s on %s:%s (%s)",
		static_dir, prefix, host, port, ", ".join(allowed),
	)

	try:
		asyncio.run(serve(handler, host, port))
	except KeyboardInterrupt:
		pass
