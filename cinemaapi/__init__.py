"""Flask HTTP API for cinema halls, movies, repertoires and seat reservations."""

__version__ = "0.1.0"