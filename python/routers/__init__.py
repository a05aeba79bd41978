"""
API Routers

- galleries/ - Galleries, photos, chapters
- access.py - Guest password check
- password_requests.py - Guest password requests
- config.py - Hosting configuration
"""
