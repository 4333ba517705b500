"""In-memory Jinja2 templates for Python output."""

CLASS_TEMPLATE = (
    "class {{ class_name }}{% if super_class %}({{ super_class }}){% endif %}:\n"
    "{{ body | indent_lines(indent) }}"
)

MODULE_TEMPLATE = "{{ sections | join(separator) }}"

PYTHON_TEMPLATES = {
    "class.py.j2": CLASS_TEMPLATE,
    "module.py.j2": MODULE_TEMPLATE,
}
