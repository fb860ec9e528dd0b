# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation): 
# Groups the web-facing pieces of the service: endpoints and request middleware
# 🧪 Purpose (Technical Summary): 
# API package initialization
# 🔗 Dependencies: 
# app.api.v1, app.api.middleware
# 🔄 Connected Modules / Calls From: 
# app.main
