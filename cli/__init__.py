"""Command line front end for wirebridge."""
