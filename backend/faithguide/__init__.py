"""FaithGuide backend: auth, sessions, onboarding and progress tracking."""
