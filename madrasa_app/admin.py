# admin.py
import csv

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.http import HttpResponse

from .demo_data import clear_demo_data
from .i18n import localize
from .models import Admin, Attendance, Fee, KitchenExpense, Student, Tenant


admin.site.site_header = "MADRASA CRM ADMINISTRATION"
admin.site.site_title = "Madrasa Admin Portal"
admin.site.index_title = "Welcome to Madrasa Admin Dashboard"


# ==================== CUSTOM ADMIN CLASSES ====================
class ExportCsvMixin:
    """Mixin to add CSV export; localized bundles are written in English"""

    def export_as_csv(self, request, queryset):
        field_names = [field.name for field in self.model._meta.fields]

        response = HttpResponse(content_type='text/csv')
        response['Content-Disposition'] = f'attachment; filename={self.model.__name__}.csv'

        writer = csv.writer(response)
        writer.writerow(field_names)
        for obj in queryset:
            row = []
            for field in field_names:
                value = getattr(obj, field)
                row.append(localize(value, 'en') if isinstance(value, dict) else value)
            writer.writerow(row)

        return response

    export_as_csv.short_description = "Export Selected as CSV"


class LocalizedNameMixin:
    def english_name(self, obj):
        return localize(obj.name, 'en')
    english_name.short_description = 'Name'


# ==================== TENANTS ====================
class TenantAdmin(admin.ModelAdmin):
    list_display = ('name', 'subdomain', 'domain', 'plan', 'is_active',
                    'demo_mode', 'demo_data_loaded', 'created_at')
    list_filter = ('is_active', 'demo_mode', 'plan')
    search_fields = ('name', 'subdomain', 'domain')
    readonly_fields = ('demo_data_loaded', 'created_at', 'updated_at')
    actions = ['clear_demo']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'subdomain', 'domain', 'is_active')
        }),
        ('Demo', {
            'fields': ('demo_mode', 'demo_data_loaded')
        }),
        ('Settings', {
            'fields': ('primary_language', 'timezone', 'currency', 'academic_year')
        }),
        ('Subscription', {
            'fields': ('plan', 'subscription_start', 'subscription_end', 'subscription_active'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def clear_demo(self, request, queryset):
        for tenant in queryset:
            clear_demo_data(tenant)
        self.message_user(request, f'Demo data cleared for {queryset.count()} tenant(s).')

    clear_demo.short_description = "Clear demo data for selected tenants"


# ==================== USER MANAGEMENT ====================
class CustomUserAdmin(BaseUserAdmin):
    list_display = ('username', 'email', 'name', 'role', 'tenant', 'is_active', 'last_login')
    list_filter = ('role', 'is_active', 'is_staff', 'is_demo_data', 'tenant')
    search_fields = ('username', 'email', 'name')
    ordering = ('-date_joined',)

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        ('Personal Info', {'fields': ('name', 'email')}),
        ('Role & Tenant', {'fields': ('role', 'tenant', 'is_super_admin', 'is_demo_data')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser',
                                    'groups', 'user_permissions')}),
        ('Important Dates', {'fields': ('last_login', 'date_joined')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'email', 'name', 'role', 'tenant', 'password1', 'password2'),
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        if obj:  # Editing an existing object
            return ('last_login', 'date_joined')
        return ()


# ==================== STUDENT MANAGEMENT ====================
class StudentAdmin(LocalizedNameMixin, ExportCsvMixin, admin.ModelAdmin):
    list_display = ('student_id', 'english_name', 'class_name', 'section',
                    'status', 'admission_date', 'tenant', 'is_demo_data')
    list_filter = ('status', 'class_name', 'is_demo_data', 'tenant')
    search_fields = ('student_id', 'name__en', 'father_name__en', 'phone')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'admission_date'
    actions = ['export_as_csv']


class AttendanceAdmin(ExportCsvMixin, admin.ModelAdmin):
    list_display = ('student', 'date', 'status', 'tenant', 'is_demo_data')
    list_filter = ('status', 'date', 'is_demo_data')
    search_fields = ('student__student_id',)
    date_hierarchy = 'date'
    list_select_related = ('student',)
    actions = ['export_as_csv']


# ==================== FINANCE ====================
class FeeAdmin(ExportCsvMixin, admin.ModelAdmin):
    list_display = ('student', 'month', 'year', 'fee_amount', 'paid_amount',
                    'due_amount', 'status', 'payment_mode')
    list_filter = ('status', 'year', 'month', 'payment_mode', 'is_demo_data')
    search_fields = ('student__student_id',)
    readonly_fields = ('due_amount', 'created_at', 'updated_at')
    list_select_related = ('student',)
    actions = ['export_as_csv']


class KitchenExpenseAdmin(ExportCsvMixin, admin.ModelAdmin):
    list_display = ('date', 'item', 'quantity', 'cost', 'total_amount', 'added_by', 'tenant')
    list_filter = ('date', 'is_demo_data')
    readonly_fields = ('total_amount', 'created_at', 'updated_at')
    date_hierarchy = 'date'
    actions = ['export_as_csv']

    def item(self, obj):
        return localize(obj.item_name, 'en')


# ==================== REGISTRATION ====================
admin.site.register(Tenant, TenantAdmin)
admin.site.register(Admin, CustomUserAdmin)
admin.site.register(Student, StudentAdmin)
admin.site.register(Attendance, AttendanceAdmin)
admin.site.register(Fee, FeeAdmin)
admin.site.register(KitchenExpense, KitchenExpenseAdmin)
