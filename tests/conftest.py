import os

import pytest


class StaticTree:
	'''
	A base directory laid out like the one used throughout the tests:

		<tmp>/secret.txt                  outside the base
		<tmp>/srv/static/report.txt
		<tmp>/srv/static/report.pdf
		<tmp>/srv/static/logo.png
		<tmp>/srv/static/empty.txt
		<tmp>/srv/static/UPPER.TXT
		<tmp>/srv/static/README
		<tmp>/srv/static/.env
		<tmp>/srv/static/data.unknownext
		<tmp>/srv/static/docs.txt/        a directory
		<tmp>/srv/static/files/report.txt
		<tmp>/srv/static/escape ->        symlink to <tmp>
	'''
	def __init__(self, tmp_path):
		self.root = os.path.realpath(tmp_path)
		self.base = os.path.join(self.root, "srv", "static")

		os.makedirs(os.path.join(self.base, "files"))
		os.makedirs(os.path.join(self.base, "docs.txt"))

		self.write(os.path.join(self.root, "secret.txt"), b"top secret\n")
		self.write(self.path("report.txt"), b"quarterly numbers\n")
		self.write(self.path("report.pdf"), b"%PDF-1.4\n")
		self.write(self.path("logo.png"), bytes(range(256)) * 4)
		self.write(self.path("empty.txt"), b"")
		self.write(self.path("UPPER.TXT"), b"shouting\n")
		self.write(self.path("README"), b"no extension\n")
		self.write(self.path(".env"), b"KEY=value\n")
		self.write(self.path("data.unknownext"), b"\x00\x01\x02")
		self.write(self.path("files", "report.txt"), b"nested report\n")

		os.symlink(self.root, self.path("escape"))

	def path(self, *parts):
		return os.path.join(self.base, *parts)

	@staticmethod
	def write(path, data):
		with open(path, "wb") as file:
			file.write(data)

	@staticmethod
	def read(path):
		with open(path, "rb") as file:
			return file.read()


@pytest.fixture
def tree(tmp_path):
	return StaticTree(tmp_path)
