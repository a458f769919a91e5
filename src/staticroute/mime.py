import mimetypes

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# A private table built from the interpreter's defaults only, so lookups
# don't change with whatever mime.types files the host happens to have.
_mime_types = mimetypes.MimeTypes()


def guess_content_type(extension):
	'''
	Look up the content type for a bare extension ("txt", not ".txt").
	Returns None if the extension isn't registered.
	'''
	if not extension:
		return None
	content_type, _encoding = _mime_types.guess_type(f"file.{extension}", strict=False)
	return content_type
