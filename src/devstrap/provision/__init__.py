"""Provisioning drivers.

Each driver makes a single pass over a static or externally supplied list,
shells out through a CommandRunner, and returns a StepReport. Individual item
failures are recorded, never raised.
"""
