"""Request rules for the /employees endpoints."""

from typing import Dict

from hrapi.validation.rules import ObjectRule, RequestSchema, number_field, string_field

# (field, label used in messages)
_TEXT_FIELDS = (
    ("name", "name"),
    ("position", "position"),
    ("department", "department"),
    ("email", "email"),
    ("phone", "phone number"),
)


def _employee_body(required: bool) -> ObjectRule:
    rules = [
        string_field(
            field,
            required=required,
            email=field == "email",
            required_msg=f"Employee {label} is required" if required else None,
            empty=f"Employee {label} cannot be empty",
            invalid_email="Employee email must be valid" if field == "email" else None,
        )
        for field, label in _TEXT_FIELDS
    ]
    rules.append(
        number_field(
            "branchId",
            required=required,
            required_msg="Employee branch ID required" if required else None,
            not_a_number="Employee branch ID must be a number",
        )
    )
    return ObjectRule(rules=rules)


_employee_id_params = ObjectRule(
    rules=[
        string_field(
            "id",
            required=True,
            required_msg="Employee ID is required",
            empty="Employee ID cannot be empty",
        ),
    ]
)

employee_schemas: Dict[str, RequestSchema] = {
    # POST /employees
    "create": RequestSchema(body=_employee_body(required=True)),
    # GET /employees/{id}
    "getById": RequestSchema(params=_employee_id_params),
    # PUT /employees/{id}
    "update": RequestSchema(params=_employee_id_params, body=_employee_body(required=False)),
    # DELETE /employees/{id}
    "delete": RequestSchema(params=_employee_id_params),
    # GET /employees
    "list": RequestSchema(query=ObjectRule(allow_unknown=True)),
    # GET /employees/branch/{branchId}
    "getByBranch": RequestSchema(
        params=ObjectRule(
            rules=[
                number_field(
                    "branchId",
                    required=True,
                    required_msg="Branch ID is required",
                    not_a_number="Branch ID must be a number",
                ),
            ]
        )
    ),
    # GET /employees/department/{department}
    "getByDepartment": RequestSchema(
        params=ObjectRule(
            rules=[
                string_field(
                    "department",
                    required=True,
                    required_msg="Department is required",
                    empty="Department cannot be empty",
                ),
            ]
        )
    ),
}
