from django.urls import path
from django.views.generic import RedirectView

from . import views

app_name = "candidature"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="candidature:apply"), name="home"),
    path("apply/", views.CandidateApplicationWizard.as_view(), name="apply"),
    path("apply/reset/", views.reset_application, name="reset"),
    path("success/<uuid:pk>/", views.CandidateSuccessView.as_view(), name="success"),
]
