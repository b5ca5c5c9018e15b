# -*- coding: utf-8; -*-


class InputError(Exception):

    pass
