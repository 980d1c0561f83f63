"""
OpenClaw Mission Control: local status dashboard for the gateway daemon
"""
__version__ = '0.1.0'
