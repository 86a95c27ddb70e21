"""Constants shared by the query builder, clients and views."""

DEFAULT_PAGE_SIZE = 50
DEFAULT_SORT_FIELD = "modifiedon"
DEFAULT_ORDERBY = "modifiedon desc"

SORTABLE_FIELDS = frozenset(
    {
        "name",
        "uniquename",
        "category",
        "statecode",
        "statuscode",
        "createdon",
        "modifiedon",
    }
)

FORMATTED_VALUE_SUFFIX = "@OData.Community.Display.V1.FormattedValue"
NEXT_LINK_FIELD = "@odata.nextLink"
COUNT_FIELD = "@odata.count"

ODATA_HEADERS = {
    "Content-Type": "application/json",
    "OData-MaxVersion": "4.0",
    "OData-Version": "4.0",
    "Accept": "application/json",
    "Prefer": 'odata.include-annotations="OData.Community.Display.V1.FormattedValue"',
}

CATEGORIES = {
    0: "Workflow",
    1: "Dialog",
    2: "Business Rule",
    3: "Action",
    4: "Business Process Flow",
    5: "Modern Flow",
}

STATUSES = {
    0: "Draft",
    1: "Activated",
}
