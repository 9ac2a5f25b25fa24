"""
Django Admin para o domínio de Funcionários.

Interface de consulta. Alterações devem passar pela API, que aplica
as regras de negócio; por isso os campos de identidade são somente
leitura.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import EmployeeAddressModel, EmployeeModel


class EmployeeAddressInline(admin.TabularInline):
    """Endereços exibidos na página do funcionário."""

    model = EmployeeAddressModel
    extra = 0
    fields = ['street', 'number', 'neighborhood', 'city', 'state', 'zip_code', 'is_main']
    readonly_fields = ['id', 'created_at']


@admin.register(EmployeeModel)
class EmployeeAdmin(admin.ModelAdmin):
    """Admin para EmployeeModel."""

    list_display = [
        'id_curto',
        'full_name',
        'email',
        'document_type',
        'position',
        'salary',
        'currency',
        'active_badge',
        'updated_at',
    ]

    list_filter = [
        'is_active',
        'document_type',
        'position',
    ]

    search_fields = [
        'id',
        'first_name',
        'last_name',
        'email',
        'document',
    ]

    readonly_fields = [
        'id',
        'document',
        'document_type',
        'created_at',
        'updated_at',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'first_name', 'last_name', 'email', 'birth_date'],
        }),
        ('Documento', {
            'fields': ['document', 'document_type'],
        }),
        ('Contrato', {
            'fields': ['position', 'salary', 'currency', 'is_active'],
        }),
        ('Timestamps', {
            'fields': ['created_at', 'updated_at'],
            'classes': ['collapse'],
        }),
    ]

    inlines = [EmployeeAddressInline]

    ordering = ['-updated_at']

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def full_name(self, obj):
        return f"{obj.first_name} {obj.last_name}"
    full_name.short_description = 'Nome'

    def active_badge(self, obj):
        """Exibe situação com badge colorido."""
        color, label = ('#28a745', 'Ativo') if obj.is_active else ('#6c757d', 'Inativo')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            label,
        )
    active_badge.short_description = 'Situação'


@admin.register(EmployeeAddressModel)
class EmployeeAddressAdmin(admin.ModelAdmin):
    """Admin para endereços de funcionários."""

    list_display = ['id', 'employee', 'city', 'state', 'zip_code', 'is_main']
    list_filter = ['is_main', 'state']
    search_fields = ['employee__id', 'employee__email', 'city', 'zip_code']
    readonly_fields = ['id', 'employee', 'created_at']
