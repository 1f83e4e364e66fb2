"""
Constants for the Tibber price alert service: GraphQL documents,
notification texts and defaults.
"""

DEFAULT_SCHEDULE_TIMEZONE = "Europe/Amsterdam"
DEFAULT_PRICE_UNIT = "EUR/kWh"

# Notification texts (Dutch, as shown in the Tibber app)
NOTIFICATION_TITLE = "Lage Prijs Alert!"
NOTIFICATION_MESSAGE = "De stroomprijs is nu het laagst vandaag: {total} {unit}."
NOTIFICATION_SCREEN = "CONSUMPTION"

GET_TODAY_PRICES_QUERY = """
{
  viewer {
    homes {
      currentSubscription {
        priceInfo {
          today {
            total
            energy
            tax
            startsAt
          }
        }
      }
    }
  }
}"""

SEND_NOTIFICATION_MUTATION = """
mutation SendPushNotification($title: String!, $message: String!) {
  sendPushNotification(input: {
    title: $title,
    message: $message,
    screenToOpen: %s
  }){
    successful
    pushedToNumberOfDevices
  }
}""" % NOTIFICATION_SCREEN
