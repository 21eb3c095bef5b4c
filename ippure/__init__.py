"""
ippure - IPPure network information panel and event notifier.

This package queries the IPPure info endpoint for the current egress IP
address and renders geolocation, ASN, risk and residential details into a
short summary suitable for a status panel or a push notification.
"""

__version__ = "0.1.0"
__author__ = "ippure"
__license__ = "Apache License 2.0"
