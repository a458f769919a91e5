import asyncio
import os
import posixpath

from staticroute import mime
from staticroute.resolver import file_extension

# 1 MiB
DEFAULT_CHUNK_SIZE = 1024 * 1024


class FileServer:
	'''
	Writes one file to a response sink: status, Content-Type, Content-Length,
	Content-Disposition, then the raw bytes. It only ever receives paths that
	a StaticFileResolver has already accepted; it does no checking of its own.

	`content_type_lookup` maps a bare extension to a content type, or None if
	the extension is unknown, in which case DEFAULT_CONTENT_TYPE is used.
	'''
	def __init__(self, *, content_type_lookup=mime.guess_content_type, chunk_size=DEFAULT_CHUNK_SIZE):
		self.content_type_lookup = content_type_lookup
		self.chunk_size = chunk_size

	def content_type(self, extension):
		return self.content_type_lookup(extension) or mime.DEFAULT_CONTENT_TYPE

	async def serve(self, file_path, sink):
		filename = posixpath.basename(file_path)
		content_type = self.content_type(file_extension(filename))

		with open(file_path, "rb") as file:
			# Size of the open file, not of whatever is at the path later on
			size = os.fstat(file.fileno()).st_size

			sink.set_status(200)
			sink.set_header("Content-Type", content_type)
			sink.set_header("Content-Length", size)
			sink.set_header("Content-Disposition", f'inline; filename="{filename}"')

			loop = asyncio.get_running_loop()
			remaining = size
			while remaining > 0:
				# Blocking reads run in the default executor
				chunk = await loop.run_in_executor(None, file.read, min(self.chunk_size, remaining))
				if not chunk:
					raise OSError(f"{file_path} shrank while being served")
				remaining -= len(chunk)
				await sink.write_body(chunk)
