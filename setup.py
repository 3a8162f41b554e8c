from setuptools import setup
import os, re

def read(*names, **kwargs):
    with open(os.path.join(os.path.dirname(__file__), *names), encoding='utf8') as fp:
        return fp.read()

def find_value(name):
    data_file = read('bfcipher', '__doc__.py')
    data_match = re.search(r"^__%s__ += ['\"]([^'\"]*)['\"]" % name, data_file, re.M)
    if data_match:
        return data_match.group(1)
    raise RuntimeError(f"Unable to find '{name}' string.")

setup(
    name                = find_value('title'),
    version             = find_value('version'),
    description         = find_value('description'),
    long_description    = read('README.rst'),
    author              = find_value('author'),
    license             = find_value('license'),
    python_requires     = '>=3.7',
    keywords            = find_value('keywords'),
    packages            = ['bfcipher'],
    classifiers         = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Topic :: Security :: Cryptography',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    extras_require      = {
        'accelerated': [
            'pycryptodome >= 3.7.2',
        ],
        'test': [
            'pytest >= 6.0',
            'pycryptodome >= 3.7.2',
        ],
    },
    install_requires    = [],
)
