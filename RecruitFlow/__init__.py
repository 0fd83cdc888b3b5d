"""RecruitFlow project package: settings, root URL configuration and WSGI entry point."""
