# urls.py
from django.urls import path

from . import views

urlpatterns = [
    # Students
    path('students', views.StudentListView.as_view(), name='student-list'),
    path('students/export', views.StudentExportView.as_view(), name='student-export'),
    path('students/<int:pk>', views.StudentDetailView.as_view(), name='student-detail'),

    # Attendance
    path('attendance', views.AttendanceListView.as_view(), name='attendance-list'),
    path('attendance/<int:pk>', views.AttendanceDetailView.as_view(), name='attendance-detail'),

    # Fees
    path('fees', views.FeeListView.as_view(), name='fee-list'),
    path('fees/reports', views.FeeReportView.as_view(), name='fee-reports'),
    path('fees/<int:pk>', views.FeeDetailView.as_view(), name='fee-detail'),

    # Kitchen
    path('kitchen', views.KitchenListView.as_view(), name='kitchen-list'),
    path('kitchen/<int:pk>', views.KitchenDetailView.as_view(), name='kitchen-detail'),

    # Parents (read-only, login optional)
    path('parents/search', views.ParentSearchView.as_view(), name='parent-search'),
    path('parents/student/<int:pk>', views.ParentStudentView.as_view(), name='parent-student'),

    # Authentication
    path('auth/login', views.LoginView.as_view(), name='login'),
    path('auth/logout', views.LogoutView.as_view(), name='logout'),

    # Dashboard
    path('dashboard/stats', views.DashboardStatsView.as_view(), name='dashboard-stats'),

    # System
    path('health/db', views.DatabaseHealthView.as_view(), name='health-db'),
    path('tenant/demo', views.TenantDemoView.as_view(), name='tenant-demo'),
]
