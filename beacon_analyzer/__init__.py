"""
Beacon Analyzer — scores host-pair traffic for command-and-control beaconing.

Converts connection timestamps and outbound byte counts for one
source/destination pair into skew, dispersion, duration and mode based
sub-scores, and runs that scoring on a pool of worker threads fed by a
bounded queue.
"""

__version__ = "0.1.0"
