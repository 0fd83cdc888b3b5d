from django.contrib import admin

from .models import Candidate


@admin.register(Candidate)
class CandidateAdmin(admin.ModelAdmin):
    list_display = ("last_name", "first_name", "email", "status", "has_experience", "created_at")
    list_filter = ("status", "has_experience", "is_immediately_available")
    search_fields = ("last_name", "first_name", "email")
    readonly_fields = ("id", "status", "submission_key", "created_at", "updated_at")
