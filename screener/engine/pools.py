"""Fixed reference pools for synthesized candidate attributes."""

from collections.abc import Sequence
from typing import TypeVar

from screener.engine.rng import Rng

T = TypeVar("T")

FIRST_NAMES = (
    "Aarav", "Aditi", "Akash", "Amrita", "Ananya", "Arjun", "Arnav", "Avni",
    "Chirag", "Deepika", "Dev", "Divya", "Gaurav", "Ishaan", "Karthik", "Kavya",
    "Kiran", "Manish", "Megha", "Mihir", "Nandini", "Nikhil", "Pallavi", "Pranav",
    "Priya", "Rahul", "Rajeev", "Riya", "Rohan", "Sakshi", "Sanya", "Shweta",
    "Siddharth", "Sneha", "Suresh", "Tanvi", "Tushar", "Uday", "Varun", "Vikram",
    "Yash", "Aishwarya", "Bhavesh", "Chetan", "Dhruv", "Esha", "Farhan", "Geeta",
    "Harsh", "Isha", "Jayesh", "Komal", "Lata", "Mayank", "Neha", "Om",
)

LAST_NAMES = (
    "Agarwal", "Bhatia", "Chandra", "Choudhary", "Das", "Deshpande", "Gandhi",
    "Gupta", "Iyer", "Jain", "Joshi", "Kapoor", "Kaur", "Khan", "Kumar",
    "Malik", "Mehta", "Menon", "Mishra", "Nair", "Patel", "Pillai", "Rao",
    "Reddy", "Saxena", "Shah", "Sharma", "Singh", "Sinha", "Srivastava",
    "Tiwari", "Varma", "Verma", "Yadav", "Desai", "Bose", "Roy", "Chatterjee",
)

LOCATIONS = (
    "Bangalore", "Hyderabad", "Mumbai", "Pune", "Chennai", "Delhi NCR",
    "Gurgaon", "Noida", "Kolkata", "Ahmedabad", "Remote (India)",
)

# Repeats weight the draw: bachelors most common, PhD rarest.
EDUCATION_LEVELS = (
    "B.Tech (CS)", "B.Tech (CS)", "B.Tech (CS)",
    "B.Tech (ECE)", "B.Tech (ECE)",
    "B.E. (CS)",
    "B.Sc (CS)",
    "M.Tech (CS)", "M.Tech (CS)",
    "M.S. (CS)",
    "MBA (Technology)",
    "PhD (CS)",
)

INSTITUTIONS = (
    "IIT Bombay", "IIT Delhi", "IIT Madras", "IIT Kanpur", "IIT Kharagpur",
    "BITS Pilani", "BITS Hyderabad", "NIT Trichy", "NIT Surathkal", "NIT Warangal",
    "Delhi University", "Mumbai University", "VIT Vellore", "SRM University",
    "Manipal University", "Amity University", "Anna University",
)

SENIORITIES = ("Mid", "Mid", "Senior", "Senior", "Senior", "Lead", "Entry")

DOMAINS = ("Fintech", "SaaS", "E-commerce", "Healthcare", "EdTech", "Logistics", "B2B")

TECH_COMPANIES = (
    "Razorpay", "CRED", "Zepto", "Meesho", "Swiggy", "Zomato", "PhonePe", "Paytm",
    "Flipkart", "Ola", "Groww", "Slice", "Jupiter", "Fi", "BrowserStack",
    "Postman", "CleverTap", "MoEngage", "Whatfix", "Darwinbox", "Freshworks",
    "Zoho", "InfraCloud", "HashedIn", "ThoughtWorks", "Airtel", "Jio", "Tata Digital",
    "Infosys", "Wipro", "HCL Technologies", "TCS Digital", "Licious", "Spinny", "Exotel",
)

PREV_COMPANIES = (
    "Accenture", "Deloitte", "EY GDS", "PwC Technology", "Capgemini", "Cognizant",
    "Mphasis", "Tech Mahindra", "LTIMindtree", "Hexaware", "Persistent Systems",
    "Publicis Sapient", "GlobalLogic", "Nagarro", "EPAM Systems",
)


def pick(pool: Sequence[T], rng: Rng) -> T:
    """Pick one element of ``pool`` using the next draw from ``rng``.

    The index is clamped so a draw rounding up to 1.0 never overruns the pool.
    """
    index = min(int(rng() * len(pool)), len(pool) - 1)
    return pool[index]
