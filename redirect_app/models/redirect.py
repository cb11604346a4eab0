from sqlalchemy import Column, String
from redirect_app.database.connection import Base
from redirect_app.services.validator import ALIAS_MAX_LENGTH, URL_MAX_LENGTH


class Redirect(Base):
    """
    A registered alias and the URL it redirects to.
    
    The alias is the primary key, so the database itself guarantees
    there is never more than one record per alias. Only url changes
    after creation.
    """
    __tablename__ = "redirects"

    # Primary key already implies an index; index=True documents that
    # every lookup goes through the alias.
    alias = Column(String(ALIAS_MAX_LENGTH), primary_key=True, index=True)
    url = Column(String(URL_MAX_LENGTH), nullable=False)

    def __repr__(self):
        return f"<Redirect {self.alias} -> {self.url}>"
