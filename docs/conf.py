# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os

# -- Project information -----------------------------------------------------
project = 'sidereal'
copyright = '2026, sidereal contributors'
author = 'sidereal contributors'
release = '0.1'

# -- General configuration ---------------------------------------------------
# sphinx-autoapi parses the sources statically, so building the docs does not
# need numpy or astropy installed.
extensions = [
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx.ext.napoleon',
    'autoapi.extension',
]

# -- AutoAPI configuration ---------------------------------------------------
autoapi_type = 'python'
autoapi_dirs = ['../sidereal']
autoapi_ignore = [
    '*/__pycache__/*',
    '*/tests/*',
]
autoapi_options = [
    'members',
    'undoc-members',
    'show-module-summary',
    'imported-members',
]
autoapi_keep_files = False
autoapi_add_toctree_entry = True

# Napoleon settings for Google and NumPy style docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = True
napoleon_include_private_with_doc = False
napoleon_use_param = True
napoleon_use_rtype = True

# Intersphinx mapping for cross-referencing external docs
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'astropy': ('https://docs.astropy.org/en/stable/', None),
}

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------
html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']

# Create _static directory if it doesn't exist (needed for build)
os.makedirs(os.path.join(os.path.dirname(__file__), '_static'), exist_ok=True)
