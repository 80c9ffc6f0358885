"""
Services Module

Business logic behind the API routers:
- auth_service: signup, login, logout, current user, onboarding, profile
- progress: daily/cumulative activity counters and lesson completions
- journal: lesson answers and reflections
- chat_history: stored chat messages
"""
