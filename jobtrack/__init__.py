# JobTrack - Job Application Tracker
"""
JobTrack - A personal job application tracker.

Register, log in, and keep track of where each application stands,
from the first submission through interview, offer or rejection.
"""

__version__ = "0.1.0"
__author__ = "JobTrack"
__description__ = "Personal job application tracker"
