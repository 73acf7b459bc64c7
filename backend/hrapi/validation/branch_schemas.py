"""Request rules for the /branches endpoints."""

from typing import Dict

from hrapi.validation.rules import ObjectRule, RequestSchema, string_field

_branch_id_params = ObjectRule(
    rules=[
        string_field(
            "id",
            required=True,
            required_msg="Branch ID is required",
            empty="Branch ID cannot be empty",
        ),
    ]
)

branch_schemas: Dict[str, RequestSchema] = {
    # POST /branches
    "create": RequestSchema(
        body=ObjectRule(
            rules=[
                string_field(
                    "name",
                    required=True,
                    required_msg="Branch name is required",
                    empty="Branch name cannot be empty",
                ),
                string_field(
                    "address",
                    required=True,
                    required_msg="Branch address is required",
                    empty="Branch address cannot be empty",
                ),
                string_field(
                    "phone",
                    required=True,
                    required_msg="Branch phone number is required",
                    empty="Branch phone number cannot be empty",
                ),
            ]
        ),
    ),
    # GET /branches/{id}
    "getById": RequestSchema(params=_branch_id_params),
    # PUT /branches/{id}
    "update": RequestSchema(
        params=_branch_id_params,
        body=ObjectRule(
            rules=[
                string_field("name", empty="Branch name cannot be empty"),
                string_field("address", empty="Branch address cannot be empty"),
                string_field("phone", empty="Branch phone number cannot be empty"),
            ]
        ),
    ),
    # DELETE /branches/{id}
    "delete": RequestSchema(params=_branch_id_params),
    # GET /branches
    "list": RequestSchema(query=ObjectRule(allow_unknown=True)),
}
