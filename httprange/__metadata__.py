# -*- coding: utf-8; -*-

# This module is executed by ``setup.py``, so it must not import anything.

version = '0.1.0'
homepage = 'https://github.com/httprange/httprange'
