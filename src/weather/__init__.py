"""
Weather Layer - OpenWeather request construction

Builds request URLs for the OpenWeather One Call API.
- No network I/O: fetching is done by the bidding script
- Settings come from the environment (.env supported)
"""
