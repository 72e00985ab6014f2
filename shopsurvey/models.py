from .extensions import db


class SurveyRecord(db.Model):
    """One submitted survey; column names are the camelCase keys the form posts."""

    __tablename__ = "surveys"
    # AUTOINCREMENT: id 永不复用
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    timestamp = db.Column(db.Text)
    store_name = db.Column("storeName", db.Text)
    business_type = db.Column("businessType", db.Text)
    monthly_revenue = db.Column("monthlyRevenue", db.Integer)
    food_cost = db.Column("foodCost", db.Integer)
    labor_cost = db.Column("laborCost", db.Integer)
    rent_cost = db.Column("rentCost", db.Integer)
    daily_customers = db.Column("dailyCustomers", db.Integer)
    seats = db.Column(db.Integer)
    online_revenue = db.Column("onlineRevenue", db.Integer)
    marketing_cost = db.Column("marketingCost", db.Integer)
    repeat_purchases = db.Column("repeatPurchases", db.Integer)
    total_customers = db.Column("totalCustomers", db.Integer)
    utility_cost = db.Column("utilityCost", db.Integer)
    average_rating = db.Column("averageRating", db.Float)
    bad_reviews = db.Column("badReviews", db.Integer)
    total_reviews = db.Column("totalReviews", db.Integer)
    social_media_mentions = db.Column("socialMediaMentions", db.Integer)
    service_bad_review_rate = db.Column("serviceBadReviewRate", db.Float)
    taste_bad_review_rate = db.Column("tasteBadReviewRate", db.Float)
    user_agent = db.Column("userAgent", db.Text)
    ip = db.Column(db.Text)

    @classmethod
    def from_fields(cls, fields):
        """Build a record from a {columnName: value} dict."""
        attrs = {col.name: key for key, col in cls.__mapper__.columns.items()}
        return cls(**{attrs[name]: value for name, value in fields.items()})

    def to_dict(self):
        return {col.name: getattr(self, key) for key, col in self.__mapper__.columns.items()}
