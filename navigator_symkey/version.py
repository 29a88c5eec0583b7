"""Navigator Symkey Meta information.
   Navigator Symkey provides 256-bit symmetric keys and AES-GCM envelopes.
"""
__title__ = 'navigator_symkey'
__description__ = (
   'Navigator Symkey provides 256-bit symmetric keys, AES-256-GCM '
   'envelopes and multibase key serialization.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2023 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
