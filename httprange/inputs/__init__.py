# -*- coding: utf-8; -*-

"""Input formats for the command-line tool.

Every input format is a function that:

- accepts a list of paths;
- returns an iterable of :class:`~httprange.Exchange`;
- may raise :exc:`InputError` on fatal errors;
- may pass through :exc:`EnvironmentError` on errors like invalid paths.
"""

from httprange.inputs.common import InputError
from httprange.inputs.combined import combined_input


formats = {
    u'combined': combined_input,
}
