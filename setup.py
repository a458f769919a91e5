from setuptools import setup

setup(
	name='staticroute',
	version='0.0.1',
	packages=[
		'staticroute'
	],
	package_dir={'': 'src'},
	platforms='any',
	python_requires='>=3.8',
	install_requires=[
		'aiohttp',
		'autocommand',
		'multidict',
	],
	extras_require={
		'test': [
			'pytest',
		],
	},
	entry_points={
		'console_scripts': [
			'staticroute=staticroute.main:main',
		],
	},
	description='A route handler serving allow-listed static files from a base directory',
)
