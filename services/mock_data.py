# services/mock_data.py
"""
Fixed payloads served by the dashboard commands.

These are display literals for the front-end screens that are not yet
wired to the database. Nothing here is derived from stored rows.
"""

STATS_CARDS = [
     {
          "title": "Total Properties",
          "value": "24",
          "change": "+2 this month",
          "icon": "Home",
          "color": "#3B82F6",
     },
     {
          "title": "Active Tenants",
          "value": "87",
          "change": "+5 this month",
          "icon": "Users",
          "color": "#10B981",
     },
     {
          "title": "Monthly Revenue",
          "value": "$42,350",
          "change": "+8% from last month",
          "icon": "DollarSign",
          "color": "#8B5CF6",
     },
     {
          "title": "Pending Issues",
          "value": "12",
          "change": "3 urgent",
          "icon": "AlertCircle",
          "color": "#EF4444",
     },
]

RECENT_ACTIVITIES = [
     {
          "type": "payment",
          "message": "Rent payment received from Unit 4B - Oak Street",
          "time": "2 hours ago",
     },
     {
          "type": "maintenance",
          "message": "Maintenance request submitted for Unit 12A - Pine Ave",
          "time": "4 hours ago",
     },
     {
          "type": "lease",
          "message": "New lease signed for Unit 7C - Maple Drive",
          "time": "1 day ago",
     },
     {
          "type": "inspection",
          "message": "Property inspection completed - Cedar Complex",
          "time": "2 days ago",
     },
]

UPCOMING_TASKS = [
     {"task": "Lease renewal - Unit 5A", "due": "Tomorrow", "priority": "high"},
     {"task": "Property inspection - Sunset Building", "due": "Dec 20", "priority": "medium"},
     {"task": "Maintenance follow-up - Unit 3B", "due": "Dec 22", "priority": "low"},
     {"task": "Rent collection - Oak Street Property", "due": "Dec 25", "priority": "high"},
]

UNITS = [
     {
          "id": "U001",
          "unit_number": "SL-201",
          "property": "Sunset Lofts",
          "block": "A",
          "floor": 2,
          "status": "Occupied",
          "type": "2BR/2BA",
          "bedrooms": 2,
          "bathrooms": 2,
          "square_footage": 1200,
          "rent": 1800,
          "security_deposit": 1800,
          "amenities": ["Parking", "AC", "Pool Access"],
          "photos": [
               "https://placehold.co/200x150/FF5733/FFFFFF?text=SL-201-1",
               "https://placehold.co/200x150/33FF57/FFFFFF?text=SL-201-2",
          ],
          "tenant_info": {"id": "T001", "name": "Alice Johnson", "lease_end_date": "2025-01-14"},
          "notes": "Recently renovated kitchen.",
     },
     {
          "id": "U002",
          "unit_number": "GVA-105",
          "property": "Green Valley Apartments",
          "block": "B",
          "floor": 1,
          "status": "Available",
          "type": "1BR/1BA",
          "bedrooms": 1,
          "bathrooms": 1,
          "square_footage": 750,
          "rent": 1500,
          "security_deposit": 1500,
          "amenities": ["Gym", "Balcony", "Wifi"],
          "photos": ["https://placehold.co/200x150/3366FF/FFFFFF?text=GVA-105-1"],
          "tenant_info": None,
          "notes": "Great view of the park.",
     },
     {
          "id": "U003",
          "unit_number": "CVC-08",
          "property": "City View Condos",
          "block": "Main",
          "floor": 5,
          "status": "Maintenance",
          "type": "3BR/2BA",
          "bedrooms": 3,
          "bathrooms": 2,
          "square_footage": 1800,
          "rent": 2200,
          "security_deposit": 2200,
          "amenities": ["Washer/Dryer", "Pet Friendly"],
          "photos": ["https://placehold.co/200x150/33FF57/FFFFFF?text=CVC-08-1"],
          "tenant_info": None,
          "notes": "Plumbing repair in progress. Estimated completion: 2024-07-01.",
     },
     {
          "id": "U004",
          "unit_number": "SL-303",
          "property": "Sunset Lofts",
          "block": "A",
          "floor": 3,
          "status": "Occupied",
          "type": "2BR/1BA",
          "bedrooms": 2,
          "bathrooms": 1,
          "square_footage": 1000,
          "rent": 1950,
          "security_deposit": 1950,
          "amenities": ["Parking", "Balcony"],
          "photos": ["https://placehold.co/200x150/FF33CC/FFFFFF?text=SL-303-1"],
          "tenant_info": {"id": "T004", "name": "David Lee", "lease_end_date": "2025-08-31"},
          "notes": "Quiet corner unit.",
     },
     {
          "id": "U005",
          "unit_number": "GVA-210",
          "property": "Green Valley Apartments",
          "block": "C",
          "floor": 2,
          "status": "Reserved",
          "type": "1BR/1BA",
          "bedrooms": 1,
          "bathrooms": 1,
          "square_footage": 800,
          "rent": 1450,
          "security_deposit": 1450,
          "amenities": ["AC", "Gym"],
          "photos": ["https://placehold.co/200x150/5733FF/FFFFFF?text=GVA-210-1"],
          "tenant_info": None,
          "notes": "Awaiting final approval for new tenant.",
     },
]

TENANTS = [
     {
          "id": 1,
          "name": "John Doe",
          "email": "john@example.com",
          "phone": "123-456-7890",
          "status": "active",
          "unit": "4B",
          "property": "Oak Street",
          "rent_amount": 1650,
          "lease_start": "2024-03-01",
          "lease_end": "2025-02-28",
     },
     {
          "id": 2,
          "name": "Jane Smith",
          "email": "jane@example.com",
          "phone": "098-765-4321",
          "status": "active",
          "unit": "7C",
          "property": "Maple Drive",
          "rent_amount": 1400,
          "lease_start": "2024-12-01",
          "lease_end": "2025-11-30",
     },
     {
          "id": 3,
          "name": "Alice Johnson",
          "email": "alice@example.com",
          "phone": "555-010-2030",
          "status": "active",
          "unit": "SL-201",
          "property": "Sunset Lofts",
          "rent_amount": 1800,
          "lease_start": "2024-01-15",
          "lease_end": "2025-01-14",
     },
     {
          "id": 4,
          "name": "David Lee",
          "email": "david@example.com",
          "phone": "555-040-5060",
          "status": "inactive",
          "unit": "SL-303",
          "property": "Sunset Lofts",
          "rent_amount": 1950,
          "lease_start": "2024-09-01",
          "lease_end": "2025-08-31",
     },
]

PROPERTY_TYPES = ["Single"] + [f"{rooms}bedroom" for rooms in range(1, 11)]

PROPERTIES = [
     {
          "id": 1,
          "name": "Sunset Lofts",
          "address": "123 Sunset Blvd",
          "block": "Block A",
          "total_units": 24,
          "occupied_units": 20,
          "vacant_units": 4,
          "monthly_rent": 43200,
          "property_type": "2bedroom",
          "status": "active",
          "image": "https://placehold.co/400x250/3B82F6/FFFFFF?text=Sunset+Lofts",
          "last_inspection": "2024-05-12",
          "manager": "Alice Johnson",
     },
     {
          "id": 2,
          "name": "Green Valley Apartments",
          "address": "45 Green Valley Rd",
          "block": "Block B",
          "total_units": 36,
          "occupied_units": 30,
          "vacant_units": 6,
          "monthly_rent": 45000,
          "property_type": "1bedroom",
          "status": "active",
          "image": "https://placehold.co/400x250/10B981/FFFFFF?text=Green+Valley",
          "last_inspection": "2024-04-28",
          "manager": "Bob Smith",
     },
     {
          "id": 3,
          "name": "City View Condos",
          "address": "9 Skyline Ave",
          "block": "Block C",
          "total_units": 18,
          "occupied_units": 15,
          "vacant_units": 3,
          "monthly_rent": 33000,
          "property_type": "3bedroom",
          "status": "maintenance",
          "image": "https://placehold.co/400x250/8B5CF6/FFFFFF?text=City+View",
          "last_inspection": "2024-06-02",
          "manager": "Carol White",
     },
]

PAYMENTS = [
     {
          "id": "P001",
          "tenant": "Alice Johnson",
          "unit": "SL-201",
          "property": "Sunset Lofts",
          "amount": 1800.0,
          "date": "2024-06-01",
          "due_date": "2024-06-01",
          "status": "Paid",
          "method": "Bank Transfer",
          "category": "Rent",
     },
     {
          "id": "P002",
          "tenant": "David Lee",
          "unit": "SL-303",
          "property": "Sunset Lofts",
          "amount": 1950.0,
          "date": "2024-06-03",
          "due_date": "2024-06-01",
          "status": "Paid",
          "method": "Mobile Money",
          "category": "Rent",
     },
     {
          "id": "P003",
          "tenant": "John Doe",
          "unit": "4B",
          "property": "Oak Street",
          "amount": 1650.0,
          "date": "2024-06-05",
          "due_date": "2024-06-05",
          "status": "Pending",
          "method": "Credit Card",
          "category": "Rent",
     },
     {
          "id": "P004",
          "tenant": "Jane Smith",
          "unit": "7C",
          "property": "Maple Drive",
          "amount": 150.0,
          "date": "2024-05-20",
          "due_date": "2024-05-15",
          "status": "Overdue",
          "method": "Cash",
          "category": "Utilities",
     },
]

EXPENSE_CATEGORIES = [
     "Maintenance",
     "Utilities",
     "Security",
     "Cleaning",
     "Renovation",
     "Insurance",
     "Legal",
]

EXPENSES = [
     {
          "id": "1",
          "amount": 450.0,
          "category": "Maintenance",
          "description": "Plumbing repair - Kitchen sink",
          "date": "2024-06-15",
          "unit_id": "A101",
          "unit_name": "Unit A101",
          "block_name": "Block A",
          "payment_method": "Bank Transfer",
          "vendor": "ProFix Plumbing",
     },
     {
          "id": "2",
          "amount": 1200.0,
          "category": "Utilities",
          "description": "Electricity bill - Common areas",
          "date": "2024-06-14",
          "unit_id": "COMMON",
          "unit_name": "Common Areas",
          "block_name": "Block A",
          "payment_method": "Direct Debit",
          "vendor": "PowerCorp",
     },
     {
          "id": "3",
          "amount": 850.0,
          "category": "Security",
          "description": "Security system maintenance",
          "date": "2024-06-12",
          "unit_id": "COMMON",
          "unit_name": "Common Areas",
          "block_name": "Block B",
          "payment_method": "Credit Card",
          "vendor": "SecureGuard Inc",
     },
     {
          "id": "4",
          "amount": 320.0,
          "category": "Cleaning",
          "description": "Deep cleaning after tenant move-out",
          "date": "2024-06-10",
          "unit_id": "B205",
          "unit_name": "Unit B205",
          "block_name": "Block B",
          "payment_method": "Cash",
          "vendor": "CleanPro Services",
     },
     {
          "id": "5",
          "amount": 2500.0,
          "category": "Renovation",
          "description": "Bathroom renovation",
          "date": "2024-06-08",
          "unit_id": "A103",
          "unit_name": "Unit A103",
          "block_name": "Block A",
          "payment_method": "Bank Transfer",
          "vendor": "RenovateRight Co",
     },
]

BUILDING_BLOCKS = ["Block A", "Block B", "Block C"]
