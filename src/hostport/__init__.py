"""
Host and port pairs.

A host is either a numeric IP address or a DNS name that will be resolved later. The
host module defines the two kinds of host and the functions that convert strings
into them; the pair module defines HostPortPair, which adds a port number and parses
and formats the usual HOST:PORT form.

Please see the individual modules for more details.
"""
