class AppStatusCode:
    # success
    OPERATION_SUCCESSFUL = "100"
    DATA_UPDATED_SUCCESSFULLY = "103"
    DATA_DELETED_SUCCESSFULLY = "104"

    # validation
    INVALID_INPUT = "200"

    # business rules
    OPERATION_ERROR = "300"
    RECORD_NOT_FOUND = "301"
    INSUFFICIENT_QUANTITY = "302"
    LOCATION_MISMATCH = "303"

    # infrastructure
    OPERATION_FAILED = "500"
    STORE_UNAVAILABLE = "501"
