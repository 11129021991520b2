from setuptools import setup
from pathlib import Path

here = Path(__file__).parent
reqs = here / 'requirements.txt'
install_requires = []
if reqs.exists():
    install_requires = [r.strip() for r in reqs.read_text().splitlines() if r.strip() and not r.strip().startswith('#')]

setup(
    name='chirp_formatter',
    version='0.1.0',
    description='Reformat frequency spreadsheets into CHIRP import CSV',
    python_requires='>=3.8',
    py_modules=['chirp_formatter', 'chirp_config', 'name_shortener'],
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'chirp-format=chirp_formatter:main',
        ],
    },
)
