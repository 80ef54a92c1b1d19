"""
URL configuration for the surfacelog project.
"""
from django.contrib import admin
from django.urls import include, path
from transmissions import views

urlpatterns = [
    path('', views.home, name='home'),
    path('search/', views.search, name='search'),
    path('handle/<path:handle>/', views.handle_detail, name='handle_detail'),
    path('new/', views.new_report, name='new_report'),
    path('reports/<uuid:report_id>/flag/', views.flag_report, name='flag_report'),
    path('reports/<uuid:report_id>/dispute/', views.dispute_report, name='dispute_report'),
    path('rules/', views.rules, name='rules'),
    path('support/', views.support, name='support'),
    path('log_in/', views.LogInView.as_view(), name='log_in'),
    path('log_in/complete/', views.complete_log_in, name='complete_log_in'),
    path('log_out/', views.log_out, name='log_out'),
    path('accounts/', include('allauth.urls')),
    path('admin/', admin.site.urls),

    path('api/reports/', views.ReportListApi.as_view(), name='report_list_api'),
    path('api/reports/<uuid:report_id>/flag/', views.flag_api, name='flag_api'),
    path('api/reports/<uuid:report_id>/dispute/', views.dispute_api, name='dispute_api'),
    path('api/search/', views.search_api, name='search_api'),
    path('api/handles/<path:handle>/', views.handle_api, name='handle_api'),
    path('api/leaderboards/', views.leaderboards_api, name='leaderboards_api'),
    path('api/me/', views.profile_api, name='profile_api'),
]
