import sys
import os
import traceback

# Add project root to path
sys.path.append(os.getcwd())

print("Starting schema verification...")

try:
    from app import schemas
    print("Schemas package imported successfully.")

    # Try instantiating a few to check for runtime errors in definitions
    from pydantic import ValidationError

    try:
        booking = schemas.BookingCreate.model_validate({
            "theatreName": "Screen 1",
            "timeSlot": "2:00 PM - 4:00 PM",
            "bookingDate": "2026-02-25",
            "guests": "4",
            "totalAmount": "1200",
            "cashAmount": "800",
            "upiAmount": "400",
        })
        print(f"BookingCreate schema valid: {booking}")
    except ValidationError as e:
        print(f"BookingCreate validation failed: {e}")

    point = schemas.TimeSlotPerformance(time_slot="2:30 PM", bookings=2, revenue=2000)
    print(f"TimeSlotPerformance dumps as: {point.model_dump(by_alias=True)}")

    try:
        schemas.LeaveApplicationCreate.model_validate({
            "startDate": "2026-03-10", "endDate": "2026-03-09", "reason": "Travel",
        })
        print("FAILURE: reversed leave dates were accepted.")
        sys.exit(1)
    except ValidationError:
        print("LeaveApplicationCreate rejects reversed dates.")

    expense = schemas.ExpenseCreate.model_validate({
        "category": "Staff Salaries", "description": "March payroll",
        "amount": "45000", "expenseDate": "2026-03-31",
    })
    print(f"ExpenseCreate schema valid: {expense}")

    print("SUCCESS: Schemas verified.")

except Exception:
    print("FAILURE: Schema verification failed.")
    traceback.print_exc()
    sys.exit(1)
